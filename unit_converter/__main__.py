from unit_converter.cli import main

main()
