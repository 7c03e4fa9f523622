"""MCP server for trackstats.

Registers the summary tools and runs via stdio transport.
"""

from mcp.server.fastmcp import FastMCP

from .tools.summary import register_summary_tools

mcp = FastMCP(
    "trackstats",
    instructions="Summarize GPX activity recordings: duration, elevation gain and distance per track",
)

register_summary_tools(mcp)


def main():
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
