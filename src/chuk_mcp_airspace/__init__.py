"""
chuk-mcp-airspace: Drone Airspace Restriction MCP Server

Answers "may a drone fly here" for Japan: no-fly zone circles around fixed
facilities (red / yellow zones), airport restriction surfaces fetched from
GSI kokuarea tiles, and exact point and path containment against both.
"""
