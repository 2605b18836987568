from ghstatus.main import main

main()
