from radixcalc.repl import main

raise SystemExit(main())
