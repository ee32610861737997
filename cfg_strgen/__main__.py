from cfg_strgen.cli import main

main()
