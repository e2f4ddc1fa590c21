"""Main script for running the claim checker in a terminal."""

import asyncio
import logging
from typing import List

from dotenv import load_dotenv

from .domain.models.errors import FactCheckError
from .domain.models.fact_check_report import FactCheckReport
from .domain.reference_data import EXAMPLE_TEXT, REFERENCE_FACTS
from .domain.services.fact_checking_service import FactCheckingService
from .infrastructure.dependencies import get_service_container

logger = logging.getLogger(__name__)


def format_report(report: FactCheckReport) -> str:
    """Render a report as plain text."""
    lines: List[str] = [
        "📊 Zusammenfassung der Überprüfung",
        f"   Aussagen geprüft: {report.total}",
        f"   Verifiziert: {report.verified}",
        f"   Umstritten: {report.disputed}",
        f"   Falsch: {report.false}",
        "",
        "Detaillierte Analyse",
    ]

    for verdict in report.verdicts:
        lines.append("")
        lines.append(verdict.status.label)
        lines.append(f'"{verdict.claim}"')

        if verdict.temporal:
            lines.append(f"📅 Zeitliche Einordnung: {verdict.temporal.message}")
            if verdict.temporal.is_outdated:
                lines.append("   ⚠️ Empfehlung: Suchen Sie nach aktuelleren Daten.")

        lines.append(f"🔍 Kontext-Analyse: {verdict.interpretation}")
        if verdict.correction:
            lines.append(f"   Korrektur: {verdict.correction}")

        if verdict.sources:
            lines.append("📚 Quellen-Bewertung:")
            for source in verdict.sources:
                lines.append(
                    f"   - {source.name} ({source.url} • Stand: {source.year}) - {source.trust_tier.label}"
                )

    return "\n".join(lines)


def format_reference_facts() -> str:
    """Render the reference facts as plain text."""
    return "\n".join(
        f"- {fact.key}: {fact.value} ({fact.source}, {fact.year})"
        for fact in REFERENCE_FACTS
    )


async def run_check(service: FactCheckingService, text: str) -> None:
    """Check a text and print the outcome."""
    print("\nChecking facts...")
    try:
        report = await service.check_text(text)
        print()
        print(format_report(report))
    except FactCheckError as e:
        print(f"\n{e}")
    except Exception as e:
        logger.error(f"Error checking content: {e}", exc_info=True)
        print(f"\nEin Fehler ist aufgetreten: {e}")


async def main():
    """Run the claim checker."""
    print("Claim Checker - statistical claims against reference data")
    print("---------------------------------------------------------")
    print("Commands: 'example', 'facts', 'quit'")

    service = get_service_container().get_fact_checking_service()

    while True:
        # Get text from user
        try:
            text = input("\nEnter a text to fact-check (or 'quit' to exit): ")
        except EOFError:
            break
        command = text.strip().lower()
        if command in ('quit', 'exit', 'q'):
            break
        if command == 'facts':
            print(format_reference_facts())
            continue
        if command == 'example':
            print(f"\n{EXAMPLE_TEXT}")
            text = EXAMPLE_TEXT

        await run_check(service, text)


if __name__ == "__main__":
    load_dotenv()
    logging.basicConfig(
        level=logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    asyncio.run(main())
