from distress.services.case_service import CaseService
from distress.services.dashboard_service import DashboardService


def test_empty_dashboard(db):
    stats = DashboardService(db).get_stats()
    assert stats.total_cases == 0
    assert stats.cases_by_status == {}
    assert stats.cases_by_nature == {}
    assert stats.cases_by_country_origin == {}
    assert stats.recent_cases == []


def test_grouped_counts_only_include_present_values(db, make_case):
    cases = [make_case(subject=f"Case {i}") for i in range(5)]
    svc = CaseService(db)
    for c in cases[:3]:
        svc.update_status(c.id, "In Progress", "Case Investigation")

    stats = DashboardService(db).get_stats()

    assert stats.total_cases == 5
    assert stats.cases_by_status == {"Pending": 2, "In Progress": 3}


def test_counts_by_nature_and_country(db, make_case):
    make_case(nature_of_case="Emergency", country_of_origin="Kenya")
    make_case(nature_of_case="Emergency", country_of_origin="Uganda")
    make_case(nature_of_case="Standard", country_of_origin="Kenya")

    stats = DashboardService(db).get_stats()

    assert stats.cases_by_nature == {"Emergency": 2, "Standard": 1}
    assert stats.cases_by_country_origin == {"Kenya": 2, "Uganda": 1}


def test_recent_cases_capped_at_five_newest_first(db, make_case):
    cases = [make_case(subject=f"Case {i}") for i in range(7)]

    recent = DashboardService(db).get_stats().recent_cases

    assert [r.id for r in recent] == [c.id for c in reversed(cases)][:5]
    assert recent[0].reference_number == cases[-1].reference_number
    assert recent[0].nature_of_case == "Emergency"


def test_recent_cases_shorter_when_few_cases(db, make_case):
    make_case()
    make_case(subject="Second")
    assert len(DashboardService(db).get_stats().recent_cases) == 2


def test_stats_serialize_with_front_end_keys(db, make_case):
    make_case()
    payload = DashboardService(db).get_stats().model_dump(by_alias=True)
    assert set(payload) == {
        "totalCases",
        "casesByStatus",
        "casesByNature",
        "casesByCountryOrigin",
        "recentCases",
    }
    assert set(payload["recentCases"][0]) == {"id", "referenceNumber", "subject", "status", "natureOfCase"}
