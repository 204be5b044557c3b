from lolli.cli import main

main()
