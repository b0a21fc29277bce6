from file_explorer.main import main

raise SystemExit(main())
