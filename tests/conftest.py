import pytest


def person(person_id, name, gender=None, is_living=0, **fields):
    """A minimal raw profile object as the service sends it."""
    data = {"Id": person_id, "Name": name, "IsLiving": is_living}
    if gender is not None:
        data["Gender"] = gender
    data.update(fields)
    return data


@pytest.fixture
def churchill():
    return {
        "Id": 5589,
        "Name": "Churchill-4",
        "IsLiving": 0,
        "Gender": "Male",
        "FirstName": "Winston",
        "LastNameAtBirth": "Churchill",
        "ShortName": "Winston Churchill",
        "LongName": "Winston Leonard Spencer Churchill",
        "BirthDate": "1874-11-30",
        "DeathDate": "1965-01-24",
        "BirthLocation": "Blenheim Palace, Oxfordshire, England",
        "DeathLocation": "London, England",
        "Father": 5594,
        "Mother": 5595,
        "Parents": {
            "5594": person(5594, "Churchill-3", "Male", BirthDate="1849-02-13"),
            "5595": person(5595, "Jerome-11", "Female", BirthDate="1854-01-09"),
        },
        "Spouses": {
            "5590": person(
                5590,
                "Hozier-1",
                "Female",
                marriage_date="1908-09-12",
                marriage_location="London",
            ),
        },
        "Children": [
            person(5591, "Churchill-5", "Male"),
            person(5592, "Churchill-6", "Female"),
        ],
        "Siblings": [],
    }
