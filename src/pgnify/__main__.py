from pgnify.app import main

main()
