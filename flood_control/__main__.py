from flood_control.main import main

main()
