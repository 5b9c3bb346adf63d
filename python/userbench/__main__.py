from userbench.cli import main

main()
