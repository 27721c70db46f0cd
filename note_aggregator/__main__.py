from note_aggregator.main import main

raise SystemExit(main())
