from icuencode.app import main

raise SystemExit(main())
