from rocketchat_notifier.cli import main

main()
