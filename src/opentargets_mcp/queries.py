"""
GraphQL query catalog for the Open Targets Platform API.

Each document is an immutable constant together with the variable slots it
declares. Non-null (``!``) variables are required; the rest may be omitted
from the request entirely.

TARGET is not bound to any tool; it is kept so the catalog covers the
single-target lookup alongside the two tool queries.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class QueryDocument:
    """A named GraphQL document and its declared variables."""

    name: str
    document: str
    required_variables: tuple[str, ...]
    optional_variables: tuple[str, ...] = ()

    @property
    def variables(self) -> tuple[str, ...]:
        return self.required_variables + self.optional_variables


TARGET = QueryDocument(
    name="target",
    document="""
    query TargetInfo($targetId: String!) {
      target(ensemblId: $targetId) {
        id
        approvedSymbol
        approvedName
        biotype
        functionDescriptions
        targetClass {
          id
          label
        }
      }
    }
    """,
    required_variables=("targetId",),
)

TARGET_ASSOCIATED_DISEASES = QueryDocument(
    name="targetAssociatedDiseases",
    document="""
    query TargetAssociatedDiseases(
      $targetId: String!,
      $page: Pagination,
      $orderByScore: String!,
      $datasources: [DatasourceSettingsInput!],
      $Bs: [String!],
      $enableIndirect: Boolean!,
      $facetFilters: [String!],
      $BFilter: String!
    ) {
      target(ensemblId: $targetId) {
        id
        approvedSymbol
        approvedName
        biotype
        associatedDiseases(
          page: $page,
          orderByScore: $orderByScore,
          datasources: $datasources,
          Bs: $Bs,
          enableIndirect: $enableIndirect,
          facetFilters: $facetFilters,
          BFilter: $BFilter
        ) {
          count
          rows {
            disease {
              id
              name
              description
              therapeuticAreas {
                id
                name
              }
            }
            score
            datasourceScores {
              id
              score
            }
          }
        }
      }
    }
    """,
    required_variables=("targetId", "orderByScore", "enableIndirect", "BFilter"),
    optional_variables=("page", "datasources", "Bs", "facetFilters"),
)

DISEASE_EVIDENCE = QueryDocument(
    name="diseaseEvidence",
    document="""
    query DiseaseEvidence(
      $diseaseId: String!,
      $ensemblId: String!,
      $datasourceIds: [String!],
      $enableIndirect: Boolean!,
      $size: Int!
    ) {
      target(ensemblId: $ensemblId) {
        id
        approvedSymbol
      }
      disease(efoId: $diseaseId) {
        id
        name
        evidences(
          ensemblIds: [$ensemblId]
          enableIndirect: $enableIndirect
          datasourceIds: $datasourceIds
          size: $size
        ) {
          count
          rows {
            id
            score
            datatypeId
            datasourceId
            target {
              id
              approvedSymbol
              approvedName
            }
            disease {
              id
              name
            }
            urls {
              niceName
              url
            }
            literature
            publicationFirstAuthor
            publicationYear
            textMiningSentences {
              text
              tStart
              tEnd
              dStart
              dEnd
              section
            }
          }
        }
      }
    }
    """,
    required_variables=("diseaseId", "ensemblId", "enableIndirect", "size"),
    optional_variables=("datasourceIds",),
)


QUERIES: dict[str, QueryDocument] = {
    query.name: query
    for query in (TARGET, TARGET_ASSOCIATED_DISEASES, DISEASE_EVIDENCE)
}


def get_query(name: str) -> QueryDocument:
    """
    Look up a query document by its logical name.

    Raises:
        KeyError: If no document has that name.
    """
    try:
        return QUERIES[name]
    except KeyError:
        raise KeyError(
            f"Unknown query: {name}. Available: {', '.join(sorted(QUERIES))}"
        ) from None
