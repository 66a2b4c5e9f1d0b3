from msg_expander.launcher import main

main()
