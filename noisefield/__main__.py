from .heightmap_gen import main

raise SystemExit(main())
