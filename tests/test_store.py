"""Repository tests against a temporary SQLite database."""

import pytest
from conftest import WALLET_A, WALLET_B

from marfa_gallery.database import UniqueViolation, run_migrations
from marfa_gallery.identifiers import is_valid_two_word_id
from marfa_gallery.store import ArtPieceRepository, ProfileRepository


def _create(repo, n, word, **overrides):
    fields = {
        "ipfs_metadata_url": f"ipfs://QmMeta{n}",
        "ipfs_image_url": f"https://ipfs.io/ipfs/QmImage{n}",
        "title": f"Piece {n}",
        "description": "",
        "identification_word": word,
        "metadata": {"name": f"Piece {n}", "attributes": [{"trait_type": "Bone", "value": "femur"}]},
    }
    fields.update(overrides)
    return repo.create(**fields)


def test_migrations_are_idempotent(db):
    assert run_migrations(db) == []


def test_create_and_fetch(db):
    repo = ArtPieceRepository(db)
    piece = _create(repo, 1, "abstract-bones")

    assert piece["identification_word"] == "abstract-bones"
    assert piece["is_minted"] is False
    assert piece["traits"] == [{"trait_type": "Bone", "value": "femur"}]
    assert piece["metadata"]["name"] == "Piece 1"
    assert "metadata_json" not in piece
    assert repo.get_by_identifier("abstract-bones")["id"] == piece["id"]
    assert repo.get_by_identifier("ancient-sky") is None


def test_duplicate_identifier_violates_unique_constraint(db):
    repo = ArtPieceRepository(db)
    _create(repo, 1, "abstract-bones")

    with pytest.raises(UniqueViolation):
        _create(repo, 2, "abstract-bones")
    # connection still usable after rollback
    assert _create(repo, 3, "ancient-sky")["id"]


def test_list_filters_and_pagination(db):
    repo = ArtPieceRepository(db)
    _create(repo, 1, "abstract-bones", title="Desert Skull")
    _create(repo, 2, "ancient-sky", title="Blue Sky")
    _create(repo, 3, "bleached-mesa", title="Mesa at Dusk")
    repo.mark_minted("ancient-sky", WALLET_A, "1001")

    pieces, total = repo.list_pieces(limit=2)
    assert total == 3
    assert len(pieces) == 2

    minted, minted_total = repo.list_pieces(minted_only=True)
    assert minted_total == 1
    assert minted[0]["identification_word"] == "ancient-sky"

    found, found_total = repo.list_pieces(search="SKULL")
    assert found_total == 1
    assert found[0]["title"] == "Desert Skull"

    by_word, _ = repo.list_pieces(search="mesa")
    assert [p["identification_word"] for p in by_word] == ["bleached-mesa"]

    shuffled, shuffled_total = repo.list_pieces(random=True)
    assert shuffled_total == 3
    assert len(shuffled) == 3


def test_mark_minted_only_once(db):
    repo = ArtPieceRepository(db)
    _create(repo, 1, "abstract-bones")

    minted = repo.mark_minted("abstract-bones", WALLET_A, "7")
    assert minted["is_minted"] is True
    assert minted["minted_by"] == WALLET_A
    assert minted["token_id"] == "7"

    assert repo.mark_minted("abstract-bones", WALLET_B, "8") is None
    assert repo.mark_minted("abstract-bones", WALLET_A, "7") is None
    assert repo.get_by_identifier("abstract-bones")["token_id"] == "7"
    assert repo.mark_minted("ancient-sky", WALLET_A) is None
    assert repo.recent_unminted() == []


def test_existing_identifiers_and_backfill_candidates(db):
    repo = ArtPieceRepository(db)
    _create(repo, 1, "abstract-bones")
    _create(repo, 2, None)
    _create(repo, 3, "NEON_PORTAL")

    assert repo.existing_identifiers() == {"abstract-bones", "NEON_PORTAL"}
    assert repo.existing_identifiers(is_valid_two_word_id) == {"abstract-bones"}

    needing = repo.pieces_needing_identifiers(is_valid_two_word_id)
    assert [row["identification_word"] for row in needing] == [None, "NEON_PORTAL"]

    repo.set_identifier(needing[0]["id"], "ancient-sky")
    db.commit()
    assert repo.get_by_identifier("ancient-sky")["title"] == "Piece 2"


def test_top_collectors(db):
    repo = ArtPieceRepository(db)
    profiles = ProfileRepository(db)
    profiles.upsert(WALLET_A, "Georgia")
    for n, word in enumerate(["abstract-bones", "ancient-sky", "bleached-mesa"]):
        _create(repo, n, word)
    repo.mark_minted("abstract-bones", WALLET_A)
    repo.mark_minted("ancient-sky", WALLET_A.lower())
    repo.mark_minted("bleached-mesa", WALLET_B)

    collectors = repo.top_collectors()

    assert collectors[0]["minted_count"] >= 1
    assert {c["wallet_address"] for c in collectors} == {WALLET_A, WALLET_A.lower(), WALLET_B}
    named = [c for c in collectors if c["name"] == "Georgia"]
    assert sum(c["minted_count"] for c in named) == 2


def test_profile_upsert_is_case_insensitive(db):
    profiles = ProfileRepository(db)
    created = profiles.upsert(WALLET_A, "Georgia", x_handle="okeeffe")
    updated = profiles.upsert(WALLET_A.lower(), "Georgia O'Keeffe")

    assert updated["id"] == created["id"]
    assert updated["name"] == "Georgia O'Keeffe"
    assert updated["x_handle"] is None
    assert len(profiles.list_all()) == 1
    assert profiles.is_admin(WALLET_A) is False

    profiles.set_admin(WALLET_A)
    assert profiles.is_admin(WALLET_A.upper().replace("0X", "0x")) is True
