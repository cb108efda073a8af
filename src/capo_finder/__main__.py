from capo_finder.cli import main

raise SystemExit(main())
