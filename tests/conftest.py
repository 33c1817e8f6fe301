"""
Shared fixtures for Open Targets MCP tests.

Provides:
- StubAPI: an httpx.MockTransport handler that records GraphQL requests
  and replays a canned response
- make_client: GraphQLClient factory wired to a StubAPI, closed after the test
- Realistic Open Targets payloads for both tools
"""

import copy
import json
from typing import Any, Optional

import httpx
import pytest

from opentargets_mcp.clients.graphql_client import GraphQLClient

TEST_ENDPOINT = "https://api.test.opentargets.org/api/v4/graphql"


class StubAPI:
    """Canned GraphQL endpoint for httpx.MockTransport."""

    def __init__(
        self,
        payload: Any = None,
        status_code: int = 200,
        text: Optional[str] = None,
        connect_error: bool = False,
    ):
        self.payload = payload
        self.status_code = status_code
        self.text = text
        self.connect_error = connect_error
        self.requests: list[dict[str, Any]] = []
        self.headers: list[httpx.Headers] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(json.loads(request.content))
        self.headers.append(request.headers)

        if self.connect_error:
            raise httpx.ConnectError("Connection refused", request=request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_variables(self) -> dict[str, Any]:
        return self.requests[-1]["variables"]


@pytest.fixture
async def make_client():
    """Factory for GraphQLClient instances backed by a StubAPI."""
    clients: list[GraphQLClient] = []

    def _make(stub: StubAPI) -> GraphQLClient:
        client = GraphQLClient(TEST_ENDPOINT, transport=httpx.MockTransport(stub))
        clients.append(client)
        return client

    yield _make

    for client in clients:
        await client.close()


# ============================================================================
# Target-disease association payloads
# ============================================================================

_BRAF_ASSOCIATIONS = {
    "data": {
        "target": {
            "id": "ENSG00000157764",
            "approvedSymbol": "BRAF",
            "approvedName": "B-Raf proto-oncogene, serine/threonine kinase",
            "biotype": "protein_coding",
            "associatedDiseases": {
                "count": 1457,
                "rows": [
                    {
                        "disease": {
                            "id": "EFO_0000756",
                            "name": "melanoma",
                            "description": "A malignant neoplasm composed of melanocytes.",
                            "therapeuticAreas": [
                                {"id": "MONDO_0045024", "name": "cancer or benign tumor"},
                                {"id": "EFO_0010285", "name": "integumentary system disease"},
                            ],
                        },
                        "score": 0.8461,
                        "datasourceScores": [
                            {"id": "cancer_gene_census", "score": 0.9324},
                            {"id": "chembl", "score": 0.9895},
                        ],
                    },
                    {
                        "disease": {
                            "id": "MONDO_0018997",
                            "name": "Noonan syndrome",
                            "description": None,
                            "therapeuticAreas": [
                                {"id": "OTAR_0000018", "name": "genetic, familial or congenital disease"},
                            ],
                        },
                        "score": 0.7712,
                        "datasourceScores": [
                            {"id": "eva", "score": 0.9501},
                        ],
                    },
                ],
            },
        }
    }
}


@pytest.fixture
def braf_associations_payload() -> dict[str, Any]:
    """Two BRAF association rows out of 1457."""
    return copy.deepcopy(_BRAF_ASSOCIATIONS)


# ============================================================================
# Disease evidence payloads
# ============================================================================

_SENTENCE = "BRAF mutations are frequent in melanoma patients."

_EVIDENCE = {
    "data": {
        "target": {"id": "ENSG00000157764", "approvedSymbol": "BRAF"},
        "disease": {
            "id": "EFO_0000756",
            "name": "melanoma",
            "evidences": {
                "count": 37,
                "rows": [
                    {
                        "id": "0b1c9e3f5d2a",
                        "score": 0.92,
                        "datatypeId": "literature",
                        "datasourceId": "europepmc",
                        "target": {
                            "id": "ENSG00000157764",
                            "approvedSymbol": "BRAF",
                            "approvedName": "B-Raf proto-oncogene, serine/threonine kinase",
                        },
                        "disease": {"id": "EFO_0000756", "name": "melanoma"},
                        "urls": [
                            {"niceName": "Europe PMC", "url": "https://europepmc.org/abstract/MED/12068308"},
                        ],
                        "literature": ["12068308"],
                        "publicationFirstAuthor": "Davies H",
                        "publicationYear": 2002,
                        "textMiningSentences": [
                            {
                                "text": _SENTENCE,
                                "tStart": 0,
                                "tEnd": 4,
                                "dStart": 31,
                                "dEnd": 39,
                                "section": "abstract",
                            }
                        ],
                    },
                    {
                        "id": "7f4e2d1c0b9a",
                        "score": 0.61,
                        "datatypeId": "genetic_association",
                        "datasourceId": "gwas_credible_sets",
                        "target": {
                            "id": "ENSG00000157764",
                            "approvedSymbol": "BRAF",
                            "approvedName": "B-Raf proto-oncogene, serine/threonine kinase",
                        },
                        "disease": {"id": "EFO_0000756", "name": "melanoma"},
                        "urls": None,
                        "literature": [""],
                        "publicationFirstAuthor": None,
                        "publicationYear": None,
                        "textMiningSentences": [],
                    },
                ],
            },
        },
    }
}


@pytest.fixture
def melanoma_evidence_payload() -> dict[str, Any]:
    """One literature row with text mining and one bare GWAS row."""
    return copy.deepcopy(_EVIDENCE)


@pytest.fixture
def sentence_text() -> str:
    return _SENTENCE


@pytest.fixture
def stub_api() -> type[StubAPI]:
    """The StubAPI class, for building canned endpoints inside tests."""
    return StubAPI
