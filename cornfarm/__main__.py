# -*- coding: utf-8 -*-
from cornfarm.cli.main import main

raise SystemExit(main())
