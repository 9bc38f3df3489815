from robot_cleaner.viz.cli import main

main()
