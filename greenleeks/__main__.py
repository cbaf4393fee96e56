from greenleeks.cli import main

raise SystemExit(main())
