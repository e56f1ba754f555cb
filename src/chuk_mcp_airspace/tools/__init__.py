"""MCP tool modules for chuk-mcp-airspace."""
