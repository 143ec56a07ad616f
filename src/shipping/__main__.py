from shipping.cli import main

raise SystemExit(main())
