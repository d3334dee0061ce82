from release_issues.cli.app import main

main()
