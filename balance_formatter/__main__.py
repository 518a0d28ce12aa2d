from balance_formatter.cli import main

main()
