from sailclub.db.models import Province
from sailclub.db.reference import CANADIAN_PROVINCES, US_STATES, seed_provinces
from sailclub.db.repositories import MemberRepository, ProvinceRepository
from sailclub.validation import ProvinceOrState


def test_seed_provinces_is_idempotent(db_session):
    assert seed_provinces(db_session) == 0
    assert len(ProvinceRepository(db_session).list(limit=500)) == len(CANADIAN_PROVINCES) + len(US_STATES)


def test_province_lookup_returns_reference_value(db_session):
    repo = ProvinceRepository(db_session)

    assert repo.lookup("ON") == ProvinceOrState(code="ON", name="Ontario", country_code="CA")
    assert repo.lookup("NY") == ProvinceOrState(code="NY", name="New York", country_code="US")


def test_province_lookup_is_exact_match(db_session):
    repo = ProvinceRepository(db_session)

    assert repo.lookup("on") is None
    assert repo.lookup("ZZ") is None


def test_provinces_listed_by_name(db_session):
    names = [p.name for p in ProvinceRepository(db_session).list_by_name()]

    assert names == sorted(names)
    assert names[0] == "Alabama"


def test_province_count_by_country(db_session):
    counts = ProvinceRepository(db_session).count_by_country()

    assert counts == {"CA": len(CANADIAN_PROVINCES), "US": len(US_STATES)}


def test_member_crud_and_ordering(db_session):
    repo = MemberRepository(db_session)

    zed = repo.create(first_name="Zed", last_name="Young", full_name="Young, Zed", home_phone="416-555-0001")
    amy = repo.create(first_name="Amy", last_name="Adams", full_name="Adams, Amy", home_phone="416-555-0002")
    db_session.commit()

    assert [m.full_name for m in repo.list_by_full_name()] == ["Adams, Amy", "Young, Zed"]
    assert repo.exists(zed.member_id)
    assert zed.task_exempt is False

    repo.update(amy, city="Kingston")
    assert repo.get(amy.member_id).city == "Kingston"

    zed_id = zed.member_id
    repo.delete(zed)
    assert not repo.exists(zed_id)
    assert repo.list_by_full_name(limit=1, offset=0)[0].member_id == amy.member_id


def test_member_province_relationship(db_session):
    member = MemberRepository(db_session).create(
        first_name="John", last_name="Smith", full_name="Smith, John",
        home_phone="416-555-1234", province_code="ON",
    )
    db_session.commit()

    assert isinstance(member.province, Province)
    assert member.province.country_code == "CA"
