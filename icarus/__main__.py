from icarus.main import main

raise SystemExit(main())
