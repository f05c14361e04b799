from ocenv import cli

raise SystemExit(cli.main())
