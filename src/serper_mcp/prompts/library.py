"""Research prompt templates exposed through MCP prompts."""

from collections.abc import Callable
from typing import Any

import mcp.types as types

from serper_mcp.exceptions import PromptNotFoundError, ValidationError

PROMPTS: dict[str, types.Prompt] = {
    "research-topic": types.Prompt(
        name="research-topic",
        description="Guide comprehensive research on a topic with structured results",
        arguments=[
            types.PromptArgument(name="topic", description="Main topic to research", required=True),
            types.PromptArgument(
                name="depth", description="Research depth (basic or detailed)", required=False
            ),
            types.PromptArgument(
                name="focus_areas",
                description="Specific areas to focus research on (comma-separated)",
                required=False,
            ),
        ],
    ),
    "compare-sources": types.Prompt(
        name="compare-sources",
        description="Compare information from multiple sources on a topic",
        arguments=[
            types.PromptArgument(
                name="topic", description="Topic to compare sources for", required=True
            ),
            types.PromptArgument(
                name="min_sources",
                description="Minimum number of sources to compare",
                required=False,
            ),
        ],
    ),
    "fact-check": types.Prompt(
        name="fact-check",
        description="Verify a claim across multiple authoritative sources",
        arguments=[
            types.PromptArgument(name="claim", description="Claim to verify", required=True),
            types.PromptArgument(
                name="thoroughness",
                description="Verification thoroughness (quick or thorough)",
                required=False,
            ),
        ],
    ),
    "news-analysis": types.Prompt(
        name="news-analysis",
        description="Analyze news coverage of a topic across outlets",
        arguments=[
            types.PromptArgument(name="topic", description="News topic to analyze", required=True),
            types.PromptArgument(
                name="time_range",
                description="Period of coverage to focus on (e.g., 'past week')",
                required=False,
            ),
            types.PromptArgument(
                name="perspective",
                description="Perspective coverage (balanced or all)",
                required=False,
            ),
        ],
    ),
    "technical-search": types.Prompt(
        name="technical-search",
        description="Focused technical and programming search",
        arguments=[
            types.PromptArgument(
                name="query", description="Technical query to search for", required=True
            ),
            types.PromptArgument(
                name="tech_stack",
                description="Relevant technologies to focus on (comma-separated)",
                required=False,
            ),
            types.PromptArgument(
                name="content_type",
                description="Type of content (docs, tutorials, issues)",
                required=False,
            ),
        ],
    ),
}


def _as_list(value: Any) -> list[str]:
    """Accept a list or a comma-separated string (prompt arguments are strings)."""
    if not value:
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return [str(item) for item in value]


def _user_message(text: str, description: str | None) -> types.GetPromptResult:
    return types.GetPromptResult(
        description=description,
        messages=[
            types.PromptMessage(
                role="user",
                content=types.TextContent(type="text", text=text),
            )
        ],
    )


def _research_topic(args: dict[str, Any]) -> str:
    topic = args["topic"]
    depth = args.get("depth") or "basic"
    focus_areas = _as_list(args.get("focus_areas"))

    focus_text = (
        f"\nFocus specifically on these areas: {', '.join(focus_areas)}" if focus_areas else ""
    )
    depth_text = (
        "\nProvide detailed analysis and comprehensive coverage."
        if depth == "detailed"
        else "\nProvide a basic overview and key points."
    )
    return (
        f"Research the topic: {topic}{focus_text}{depth_text}\n\n"
        "Organize the findings into:\n"
        "1. Overview\n2. Key Points\n3. Supporting Evidence\n4. Expert Opinions\n5. Conclusions"
    )


def _compare_sources(args: dict[str, Any]) -> str:
    topic = args["topic"]
    min_sources = args.get("min_sources") or 3
    return (
        f"Compare at least {min_sources} different sources on: {topic}\n\n"
        "Analyze:\n"
        "1. Points of Agreement\n2. Differing Perspectives\n3. Source Credibility\n"
        "4. Supporting Evidence\n5. Synthesis of Findings"
    )


def _fact_check(args: dict[str, Any]) -> str:
    claim = args["claim"]
    thoroughness = args.get("thoroughness") or "quick"
    depth = (
        "\nPerform a comprehensive fact-check using multiple authoritative sources."
        if thoroughness == "thorough"
        else "\nQuickly verify the main points using reliable sources."
    )
    return (
        f'Fact check this claim: "{claim}"{depth}\n\n'
        "Provide:\n"
        "1. Verification Status\n2. Supporting Evidence\n3. Authoritative Sources\n"
        "4. Context\n5. Final Assessment"
    )


def _news_analysis(args: dict[str, Any]) -> str:
    topic = args["topic"]
    time_range = args.get("time_range")
    perspective = args.get("perspective") or "balanced"

    time_filter = f"\nFocus on coverage from: {time_range}" if time_range else ""
    perspective_guide = (
        "\nInclude all viewpoints and perspectives in the analysis."
        if perspective == "all"
        else "\nFocus on balanced, factual coverage from reliable sources."
    )
    return (
        f"Analyze news coverage of: {topic}{time_filter}{perspective_guide}\n\n"
        "Provide:\n"
        "1. Coverage Overview\n2. Main Narratives\n3. Different Perspectives\n"
        "4. Potential Biases\n5. Key Takeaways"
    )


def _technical_search(args: dict[str, Any]) -> str:
    query = args["query"]
    tech_stack = _as_list(args.get("tech_stack"))
    content_type = args.get("content_type") or "all"

    tech_context = f"\nFocus on: {', '.join(tech_stack)}" if tech_stack else ""
    content_focus = f"\nPrioritize {content_type} in the results." if content_type != "all" else ""
    return (
        f"Technical search for: {query}{tech_context}{content_focus}\n\n"
        "Organize results into:\n"
        "1. Best Practices\n2. Implementation Examples\n3. Common Issues\n"
        "4. Documentation References\n5. Community Insights"
    )


_RENDERERS: dict[str, Callable[[dict[str, Any]], str]] = {
    "research-topic": _research_topic,
    "compare-sources": _compare_sources,
    "fact-check": _fact_check,
    "news-analysis": _news_analysis,
    "technical-search": _technical_search,
}


class PromptLibrary:
    """Named prompt templates rendered into a single user message."""

    def list_prompts(self) -> list[types.Prompt]:
        """Return descriptors for every available prompt."""
        return list(PROMPTS.values())

    def get_prompt(
        self, name: str, arguments: dict[str, Any] | None = None
    ) -> types.GetPromptResult:
        """
        Render a prompt template.

        Args:
            name: Prompt name (e.g. "research-topic")
            arguments: Template arguments; optional ones fall back to defaults

        Returns:
            Prompt result holding one user-role text message

        Raises:
            PromptNotFoundError: If no prompt has this name
            ValidationError: If a required argument is missing
        """
        prompt = PROMPTS.get(name)
        if prompt is None:
            raise PromptNotFoundError(name)

        args = dict(arguments or {})
        for argument in prompt.arguments or []:
            if argument.required and not args.get(argument.name):
                raise ValidationError(argument.name, f"Argument is required for prompt '{name}'")

        text = _RENDERERS[name](args)
        return _user_message(text, prompt.description)
