from term2048.main import main

raise SystemExit(main())
