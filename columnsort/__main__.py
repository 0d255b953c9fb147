from columnsort.cli import main

raise SystemExit(main())
