"""
Unit tests for input validation and GraphQL variable construction.

Covers:
- drop_unset semantics
- Defaults substituted for non-null query variables
- Local-only fields never reaching the request

Run with: pytest tests/unit/test_variables.py -v
"""

import pytest

from opentargets_mcp.errors import InputValidationError
from opentargets_mcp.queries import DISEASE_EVIDENCE, TARGET_ASSOCIATED_DISEASES
from opentargets_mcp.schemas import DiseaseEvidenceQuery, TargetDiseaseAssociationsQuery
from opentargets_mcp.server.handlers import disease_evidence, target_associations
from opentargets_mcp.services.variables import drop_unset


class TestDropUnset:
    def test_removes_none_only(self):
        variables = {"a": None, "b": False, "c": 0, "d": "", "e": [], "f": "x"}

        assert drop_unset(variables) == {"b": False, "c": 0, "d": "", "e": [], "f": "x"}

    def test_returns_copy(self):
        variables = {"a": None, "b": 1}

        result = drop_unset(variables)

        assert result is not variables
        assert variables == {"a": None, "b": 1}


class TestAssociationVariables:
    def test_minimal_input(self):
        params = TargetDiseaseAssociationsQuery.from_arguments(
            {"targetId": "ENSG00000157764", "page": {"index": 0, "size": 10}}
        )

        variables = target_associations.build_variables(params)

        assert variables == {
            "targetId": "ENSG00000157764",
            "page": {"index": 0, "size": 10},
            "orderByScore": "score",
            "enableIndirect": False,
            "BFilter": "",
        }

    def test_no_unset_values_are_sent(self):
        params = TargetDiseaseAssociationsQuery.from_arguments(
            {"targetId": "ENSG00000157764", "page": {}, "datasources": None}
        )

        variables = target_associations.build_variables(params)

        assert all(value is not None for value in variables.values())
        assert "datasources" not in variables
        assert "Bs" not in variables
        assert "facetFilters" not in variables

    def test_include_disease_details_is_local(self):
        params = TargetDiseaseAssociationsQuery.from_arguments(
            {
                "targetId": "ENSG00000157764",
                "page": {"index": 1, "size": 5},
                "includeDiseaseDetails": True,
            }
        )

        variables = target_associations.build_variables(params)

        assert "includeDiseaseDetails" not in variables
        assert "include_disease_details" not in variables
        assert set(variables) <= set(TARGET_ASSOCIATED_DISEASES.variables)

    def test_all_filters(self):
        params = TargetDiseaseAssociationsQuery.from_arguments(
            {
                "targetId": "ENSG00000157764",
                "page": {"index": 2, "size": 25},
                "orderByScore": "chembl",
                "Bs": ["EFO_0000756"],
                "datasources": [{"id": "chembl", "weight": 0.5, "propagate": True}],
                "enableIndirect": True,
                "facetFilters": ["therapeutic_area:MONDO_0045024"],
                "BFilter": "EFO_",
            }
        )

        variables = target_associations.build_variables(params)

        assert variables["page"] == {"index": 2, "size": 25}
        assert variables["orderByScore"] == "chembl"
        assert variables["Bs"] == ["EFO_0000756"]
        assert variables["datasources"] == [
            {"id": "chembl", "weight": 0.5, "propagate": True, "required": False}
        ]
        assert variables["enableIndirect"] is True
        assert variables["facetFilters"] == ["therapeutic_area:MONDO_0045024"]
        assert variables["BFilter"] == "EFO_"

    def test_required_slots_always_filled(self):
        params = TargetDiseaseAssociationsQuery.from_arguments(
            {"targetId": "ENSG00000157764", "page": {}}
        )

        variables = target_associations.build_variables(params)

        for name in TARGET_ASSOCIATED_DISEASES.required_variables:
            assert variables[name] is not None


class TestAssociationValidation:
    def test_target_id_required(self):
        with pytest.raises(InputValidationError, match="targetId"):
            TargetDiseaseAssociationsQuery.from_arguments({"page": {"index": 0, "size": 10}})

    def test_page_required(self):
        with pytest.raises(InputValidationError, match="page"):
            TargetDiseaseAssociationsQuery.from_arguments({"targetId": "ENSG00000157764"})

    @pytest.mark.parametrize("page", [{"index": -1, "size": 10}, {"index": 0, "size": 0}])
    def test_page_bounds(self, page):
        with pytest.raises(InputValidationError):
            TargetDiseaseAssociationsQuery.from_arguments(
                {"targetId": "ENSG00000157764", "page": page}
            )

    def test_unknown_fields_rejected(self):
        with pytest.raises(InputValidationError, match="limit"):
            TargetDiseaseAssociationsQuery.from_arguments(
                {"targetId": "ENSG00000157764", "page": {}, "limit": 5}
            )

    def test_wrong_type_rejected(self):
        with pytest.raises(InputValidationError):
            TargetDiseaseAssociationsQuery.from_arguments(
                {"targetId": "ENSG00000157764", "page": {}, "enableIndirect": "maybe"}
            )

    @pytest.mark.parametrize(
        "overrides",
        [
            {"page": {"index": "0", "size": 10}},
            {"page": {"index": 0, "size": 10.0}},
            {"enableIndirect": "true"},
            {"includeDiseaseDetails": 1},
        ],
    )
    def test_scalars_not_coerced(self, overrides):
        arguments = {"targetId": "ENSG00000157764", "page": {"index": 0, "size": 10}, **overrides}

        with pytest.raises(InputValidationError):
            TargetDiseaseAssociationsQuery.from_arguments(arguments)

    def test_b_filter_kept_verbatim(self):
        params = TargetDiseaseAssociationsQuery.from_arguments(
            {"targetId": "ENSG00000157764", "page": {}, "BFilter": " mela "}
        )

        assert target_associations.build_variables(params)["BFilter"] == " mela "


class TestEvidenceVariables:
    def test_defaults(self):
        params = DiseaseEvidenceQuery.from_arguments({})

        variables = disease_evidence.build_variables(params)

        assert variables == {
            "diseaseId": "EFO_0006335",
            "ensemblId": "ENSG00000091157",
            "datasourceIds": ["gwas_credible_sets"],
            "enableIndirect": True,
            "size": 10,
        }

    def test_null_datasources_are_dropped(self):
        params = DiseaseEvidenceQuery.from_arguments({"datasourceIds": None})

        variables = disease_evidence.build_variables(params)

        assert "datasourceIds" not in variables
        assert set(variables) == set(DISEASE_EVIDENCE.required_variables)

    def test_defaults_are_not_shared(self):
        first = DiseaseEvidenceQuery.from_arguments({})
        first.datasource_ids.append("europepmc")

        second = DiseaseEvidenceQuery.from_arguments({})

        assert second.datasource_ids == ["gwas_credible_sets"]

    def test_size_must_be_positive(self):
        with pytest.raises(InputValidationError, match="size"):
            DiseaseEvidenceQuery.from_arguments({"size": 0})

    @pytest.mark.parametrize("overrides", [{"size": "5"}, {"enableIndirect": "false"}])
    def test_scalars_not_coerced(self, overrides):
        with pytest.raises(InputValidationError):
            DiseaseEvidenceQuery.from_arguments(overrides)
