from todo_mcp.cli import main

main()
