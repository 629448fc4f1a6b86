"""
Tests for match summaries.
"""

from tba_data.matches import describe_match, get_match_summaries


def match(key, comp_level, set_number, match_number, predicted_time, winning_alliance=""):
    return {
        'key': key,
        'comp_level': comp_level,
        'set_number': set_number,
        'match_number': match_number,
        'predicted_time': predicted_time,
        'winning_alliance': winning_alliance,
    }


MATCHES = [
    match("2024ohcl_f1m1", "f", 1, 1, 1711900000),
    match("2024ohcl_qm12", "qm", 1, 12, 1711800500, "blue"),
    match("2024ohcl_sf4m1", "sf", 4, 1, 1711850000, "red"),
    match("2024ohcl_qm3", "qm", 1, 3, 1711800000, "red"),
]


def test_matches_sorted_by_predicted_time(client, session):
    session.routes["/team/frc4611/event/2024ohcl/matches/simple"] = MATCHES

    summaries = get_match_summaries(client)

    assert [s.to_dict() for s in summaries] == [
        {'MatchKey': "2024ohcl_qm3", 'Description': "Qualifying Match 3", 'MatchCompleted': True},
        {'MatchKey': "2024ohcl_qm12", 'Description': "Qualifying Match 12", 'MatchCompleted': True},
        {'MatchKey': "2024ohcl_sf4m1", 'Description': "Semifinal Match 4", 'MatchCompleted': True},
        {'MatchKey': "2024ohcl_f1m1", 'Description': "Final 1", 'MatchCompleted': False},
    ]


def test_explicit_keys_are_normalized(client, session):
    session.routes["/team/frc48/event/2024mnmi/matches/simple"] = []
    assert get_match_summaries(client, "48", "2024mnmi") == []


def test_other_levels_have_no_description():
    assert describe_match(match("2019ohcl_qf1m1", "qf", 1, 1, None)) == ""
    assert describe_match(match("2016ohcl_ef1m1", "ef", 1, 1, None)) == ""


def test_unplayed_match_without_winner(client, session):
    session.routes["/team/frc4611/event/2024ohcl/matches/simple"] = [
        match("2024ohcl_qm40", "qm", 1, 40, None, None),
        match("2024ohcl_qm39", "qm", 1, 39, 1711809000, ""),
    ]

    summaries = get_match_summaries(client)

    assert [s.match_key for s in summaries] == ["2024ohcl_qm39", "2024ohcl_qm40"]
    assert not any(s.match_completed for s in summaries)
