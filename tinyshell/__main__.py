from tinyshell.main import main

raise SystemExit(main())
