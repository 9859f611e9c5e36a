from report_safety_analyzer.validation.safety_runner import main

raise SystemExit(main())
