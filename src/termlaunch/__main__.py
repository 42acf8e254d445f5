from termlaunch.cli import main

raise SystemExit(main())
