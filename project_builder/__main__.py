from project_builder.cli import main

main()
