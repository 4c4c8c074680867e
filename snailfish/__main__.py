from snailfish.cli.search_cli import main

raise SystemExit(main())
