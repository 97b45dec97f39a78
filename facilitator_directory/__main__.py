from facilitator_directory.cli import main

raise SystemExit(main())
