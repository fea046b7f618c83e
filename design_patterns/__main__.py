from design_patterns.cli.demo import main

raise SystemExit(main())
