"""HTTP runner for MCP server (Smithery / remote deployment)."""
import os

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.server import TransportSecuritySettings
from youtube_mcp.server import (
    app_lifespan,
    get_video_transcript,
    enhanced_transcript,
    get_key_moments,
    get_segmented_transcript,
    transcript_resource,
    transcript_language_resource,
    video_resource,
    channel_resource,
    transcript_summary,
    segment_analysis,
    help_resource,
    TOOL_ANNOTATIONS,
)

server = FastMCP(
    "YouTube MCP",
    instructions="Fetch, search, segment and format YouTube video transcripts",
    lifespan=app_lifespan,
    host="0.0.0.0",
    port=int(os.environ.get("YT_MCP_HTTP_PORT", "8401")),
    transport_security=TransportSecuritySettings(enable_dns_rebinding_protection=False),
)

# Register tools with annotations
server.tool(annotations=TOOL_ANNOTATIONS)(get_video_transcript)
server.tool(annotations=TOOL_ANNOTATIONS)(enhanced_transcript)
server.tool(annotations=TOOL_ANNOTATIONS)(get_key_moments)
server.tool(annotations=TOOL_ANNOTATIONS)(get_segmented_transcript)

# Register prompts
server.prompt()(transcript_summary)
server.prompt()(segment_analysis)

# Register resources
server.resource("youtube://transcript/{video_id}")(transcript_resource)
server.resource("youtube://transcript/{video_id}/{language}")(transcript_language_resource)
server.resource("youtube://video/{video_id}")(video_resource)
server.resource("youtube://channel/{channel_id}")(channel_resource)
server.resource("youtube://help")(help_resource)

server.run(transport="streamable-http")
