from zsh_history_to_fish.main import main

main()
