"""mcpreg - MCP server registry search and local mcp-config.json management."""
