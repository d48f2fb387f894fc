"""Web-search-grounded company summaries.

Asks a generative model, with its built-in web search enabled, for a
three-section Markdown report on a company's past 12 months. Failures never
propagate: they are turned into summary text so the filings view keeps
working when the AI side does not.
"""

from __future__ import annotations

from pydantic_ai import Agent
from pydantic_ai.builtin_tools import WebSearchTool
from pydantic_ai.models import Model

from finsight.core.exceptions import SUMMARY_FAILURE_PREFIX, GenerationError, SummaryError
from finsight.core.logging import get_logger
from finsight.processing.llm import create_model
from finsight.processing.summary.models import SummaryResult

logger = get_logger(__name__)

NO_SUMMARY_TEXT = "No summary generated."

SUMMARY_PROMPT_TEMPLATE = """You are an expert financial analyst. The user wants a comprehensive summary of the past year's financial reports and major company announcements for {company_name} ({ticker}).

Please use web search to find the latest financial results (10-K, 10-Q), earnings call summaries, and major company announcements from their official website and reputable news sources over the past 12 months.

Provide a detailed summary formatted in Markdown including:
1. **Financial Performance**: Revenue, Profit, EPS, and key financial metrics.
2. **Major Announcements & Strategic Moves**: Product launches, acquisitions, leadership changes, etc.
3. **Overall Outlook & Guidance**: What the company expects for the upcoming quarters."""


def build_summary_prompt(company_name: str, ticker: str) -> str:
    """Build the fixed summary instruction for one company."""
    return SUMMARY_PROMPT_TEMPLATE.format(company_name=company_name, ticker=ticker.upper())


def create_summary_agent(model: Model | None = None) -> Agent[None, str]:
    """Create a PydanticAI agent with the provider's web search enabled.

    Raises:
        ConfigurationError: If no model is given and no API key is configured
    """
    agent: Agent[None, str] = Agent(
        model or create_model(),
        output_type=str,
        builtin_tools=[WebSearchTool()],
    )
    return agent


class SummaryGenerator:
    """Generates Markdown company summaries with a web-search-enabled LLM.

    Usage:
        generator = SummaryGenerator()
        result = await generator.generate("Apple Inc.", "AAPL")
        print(result.narrative_text)
    """

    def __init__(self, model: Model | None = None) -> None:
        self._model = model
        self._agent: Agent[None, str] | None = None

    @property
    def agent(self) -> Agent[None, str]:
        """Get or create the summary agent."""
        if self._agent is None:
            self._agent = create_summary_agent(self._model)
        return self._agent

    async def _run(self, prompt: str) -> str:
        try:
            result = await self.agent.run(prompt)
        except SummaryError:
            raise
        except Exception as e:
            raise GenerationError(str(e) or type(e).__name__) from e
        return result.output

    async def generate(self, company_name: str, ticker: str) -> SummaryResult:
        """Generate a summary, embedding any failure in the returned text.

        Args:
            company_name: Display name, e.g. "Apple Inc."
            ticker: Stock ticker symbol

        Returns:
            SummaryResult; ``failed`` is set when the text is an error message
        """
        ticker = ticker.upper()
        logger.debug("Generating summary", ticker=ticker, company_name=company_name)

        try:
            text = await self._run(build_summary_prompt(company_name, ticker))
        except SummaryError as e:
            logger.warning(
                "Summary generation failed",
                ticker=ticker,
                error_type=type(e).__name__,
                error=e.message,
            )
            return SummaryResult(
                ticker=ticker,
                company_name=company_name,
                narrative_text=f"{SUMMARY_FAILURE_PREFIX}{e.message}",
                failed=True,
            )

        text = text.strip()
        logger.info("Summary generated", ticker=ticker, chars=len(text))
        return SummaryResult(
            ticker=ticker,
            company_name=company_name,
            narrative_text=text or NO_SUMMARY_TEXT,
        )
