from pymdb.main import main

raise SystemExit(main())
