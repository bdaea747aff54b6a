from mulmod.main import main

main()
