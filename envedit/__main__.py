from envedit.main import main

raise SystemExit(main())
