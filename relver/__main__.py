from relver.cli.app import main

main()
