from ddd_skeleton.cli import main

main()
