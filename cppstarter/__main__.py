from cppstarter.cli import main

main()
