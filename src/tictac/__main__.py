from tictac.app import main

main()
