from grover_match.main import main

raise SystemExit(main())
