import random

import pytest

from cropcare.services.diseases import CROP_TYPES, DISEASE_DATABASE, FALLBACK_DISEASE, get_random_disease


@pytest.mark.parametrize(
    "crop, expected",
    [("Tomato", "Early Blight"), ("Rice", "Blast Disease"), ("Potato", "Late Blight")],
)
def test_known_crops_return_their_disease(crop, expected):
    assert get_random_disease(crop).name == expected


@pytest.mark.parametrize("crop", ["", "Wheat", "Other", "tomato", "Unknown crop"])
def test_unknown_crops_fall_back(crop):
    disease = get_random_disease(crop)
    assert disease.name == "Fungal Leaf Spot"
    assert disease.confidence == 78
    assert disease.severity == "Medium"


def test_pick_is_uniform_over_the_crop_list(monkeypatch):
    extra = FALLBACK_DISEASE.model_copy(update={"name": "Leaf Curl"})
    monkeypatch.setitem(DISEASE_DATABASE, "Tomato", DISEASE_DATABASE["Tomato"] + [extra])
    names = {get_random_disease("Tomato", random.Random(seed)).name for seed in range(50)}
    assert names == {"Early Blight", "Leaf Curl"}


def test_returned_records_are_copies():
    disease = get_random_disease("Tomato")
    disease.prevention.append("changed")
    assert "changed" not in DISEASE_DATABASE["Tomato"][0].prevention


def test_treatments_are_grouped_by_type():
    disease = get_random_disease("Rice")
    assert [t.name for t in disease.treatments_of("fertilizer")] == ["Potassium Chloride"]
    assert [t.name for t in disease.treatments_of("pesticide")] == ["Tricyclazole"]
    assert [t.name for t in disease.treatments_of("organic")] == ["Silicon Fertilizer"]


def test_every_record_has_five_prevention_tips():
    for diseases in DISEASE_DATABASE.values():
        for disease in diseases:
            assert len(disease.prevention) == 5
            assert {t.type for t in disease.treatments} == {"fertilizer", "pesticide", "organic"}


def test_crop_types_cover_database_keys():
    assert set(DISEASE_DATABASE) <= set(CROP_TYPES)
    assert CROP_TYPES[-1] == "Other"
