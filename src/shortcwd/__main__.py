from shortcwd.main import main

main()
