from nightfall.main import main

main()
