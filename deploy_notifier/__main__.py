from deploy_notifier.cli import main

main()
