from colorspec.cli.main import main

main()
