from appjwt.cli import main

raise SystemExit(main())
