from aptree.modules.cli import main

raise SystemExit(main())
