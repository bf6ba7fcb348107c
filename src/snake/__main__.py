from snake.main import main

main()
