from scsr.cli import main

main()
