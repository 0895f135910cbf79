from unitsense.main import main

main()
