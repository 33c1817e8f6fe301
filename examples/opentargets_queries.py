"""
Open Targets MCP Query Examples

Practical usage of the two Open Targets tools from an MCP client. Each
example starts the server over stdio and prints a short report.

Requirements:
    - opentargets-mcp installed (pip install -e .)
    - Network access to the Open Targets Platform API

Setup:
    # Optional: point at another deployment
    export OPEN_TARGETS_API="https://api.platform.opentargets.org/api/v4/graphql"

    # Run examples
    python examples/opentargets_queries.py
"""

import asyncio
import json

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client

SERVER_PARAMS = StdioServerParameters(command="opentargets-mcp")


async def call(tool: str, arguments: dict) -> dict:
    """Start the server, run one tool call and decode its JSON payload."""
    async with stdio_client(SERVER_PARAMS) as (read, write):
        async with ClientSession(read, write) as session:
            await session.initialize()
            result = await session.call_tool(tool, arguments=arguments)

            if result.isError:
                raise RuntimeError(result.content[0].text)
            return json.loads(result.content[0].text)


# ==============================================================================
# Example 1: BRAF Disease Associations
# ==============================================================================
# Scientific Context:
#   BRAF V600E drives a large share of melanomas and is also found in
#   thyroid, colorectal and RASopathy phenotypes.
#
# Use Case:
#   Target-centric disease discovery, ranked by overall association score.
# ==============================================================================

async def example_1_braf_associations():
    """
    Example 1: top diseases associated with BRAF

    Expected Output:
        - Total association count (well over 1000)
        - Melanoma and thyroid cancers near the top
        - Per-datasource scores for each disease
    """
    print("\n" + "=" * 80)
    print("Example 1: BRAF Disease Associations")
    print("=" * 80)

    data = await call(
        "target_disease_associations",
        {
            "targetId": "ENSG00000157764",
            "page": {"index": 0, "size": 5},
            "includeDiseaseDetails": True,
        },
    )

    target = data["summary"]["target"]
    counts = data["summary"]["diseaseAssociations"]
    print(f"\nTarget: {target['symbol']} ({target['id']})")
    print(f"Associations: {counts['returned']} of {counts['count']}")

    for row in data["associations"]:
        disease = row["disease"]
        print(f"\n  - {disease['name']} [{disease['id']}]: score={row['overallScore']:.3f}")
        areas = ", ".join(area["name"] for area in disease.get("therapeuticAreas", []))
        if areas:
            print(f"    Therapeutic areas: {areas}")
        for evidence in row["evidenceScores"][:3]:
            print(f"    {evidence['source']}: {evidence['score']:.3f}")


# ==============================================================================
# Example 2: Melanoma Literature Evidence for BRAF
# ==============================================================================
# Scientific Context:
#   Europe PMC text mining links target and disease mentions in the same
#   sentence of a publication.
#
# Use Case:
#   Pull the sentences behind an association for a quick literature review.
# ==============================================================================

async def example_2_melanoma_literature():
    """
    Example 2: Europe PMC evidence linking BRAF and melanoma

    Expected Output:
        - Publication identifiers with first-author citations
        - Sentences with the matched target and disease terms
    """
    print("\n" + "=" * 80)
    print("Example 2: Melanoma Literature Evidence")
    print("=" * 80)

    data = await call(
        "disease_evidence",
        {
            "diseaseId": "EFO_0000756",
            "targetId": "ENSG00000157764",
            "datasourceIds": ["europepmc"],
            "size": 5,
        },
    )

    summary = data["summary"]
    print(f"\nDisease: {summary['disease']['name']}, target: {summary['target']['symbol']}")
    print(f"Evidence rows: {summary['evidences']['returned']} of {summary['evidences']['count']}")

    for row in data["evidences"]:
        literature = row.get("literature")
        if literature:
            print(f"\n  PMID {literature['publicationId']}: {literature['title'] or 'untitled'}")
        for match in row.get("textMining", [])[:2]:
            terms = ", ".join(f"{t['type']}={t['term']}" for t in match["matchedTerms"])
            print(f"    \"{match['text'][:100]}\"")
            print(f"    matched: {terms}")


# ==============================================================================
# Example 3: Type 2 Diabetes Genetic Evidence (defaults)
# ==============================================================================

async def example_3_default_evidence():
    """Example 3: GWAS credible-set evidence using the tool defaults."""
    print("\n" + "=" * 80)
    print("Example 3: Default Evidence Query")
    print("=" * 80)

    data = await call("disease_evidence", {})

    for row in data["evidences"]:
        source = row.get("source", {})
        print(f"  - {row['datasourceId']} score={row['score']:.3f} {source.get('url', '')}")


async def main():
    """Run selected examples."""
    print("=" * 80)
    print("Open Targets MCP - Query Examples")
    print("=" * 80)
    print("\nExamples:")
    print("  1. BRAF disease associations")
    print("  2. Melanoma literature evidence for BRAF")
    print("  3. Default evidence query")

    choice = input("\nRun which example? (1-3, or 'all'): ").strip()

    examples = {
        "1": example_1_braf_associations,
        "2": example_2_melanoma_literature,
        "3": example_3_default_evidence,
    }

    if choice.lower() == "all":
        for func in examples.values():
            await func()
    elif choice in examples:
        await examples[choice]()
    else:
        print(f"Invalid choice: {choice}")


if __name__ == "__main__":
    asyncio.run(main())
