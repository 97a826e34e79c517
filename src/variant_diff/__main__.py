from variant_diff.cli import main

raise SystemExit(main())
