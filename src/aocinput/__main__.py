from aocinput.cli import main

main()
