from canvas_editor.adapters.socket.app import main

raise SystemExit(main())
