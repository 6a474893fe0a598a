from connect4.main import main

raise SystemExit(main())
