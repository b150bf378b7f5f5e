from pytxt.main import main

raise SystemExit(main())
