"""Company Routes - list, detail, create, update, delete, industry association.

Invariants:
    - Detail includes invoice ids and industry labels (order-independent)
    - Codes are slugified on create ("Acme Corp!" -> "acmecorp")
    - Missing company → 404 on get/update/delete
    - Duplicate code or unknown industry → 409
    - Deleting a company cascades to its invoices and associations
"""

from sqlalchemy import func, select

from biztime.models.industry import CompanyIndustry
from biztime.models.invoice import Invoice


async def test_list_companies(client, seed_company):
    res = await client.get("/companies")
    assert res.status_code == 200
    assert res.json() == {
        "companies": [{"code": "test", "name": "Test Company"}],
    }


async def test_list_companies_empty(client):
    res = await client.get("/companies")
    assert res.status_code == 200
    assert res.json() == {"companies": []}


async def test_get_company_with_invoices_and_industries(
    client, seed_invoice, linked_industry,
):
    res = await client.get("/companies/test")
    assert res.status_code == 200
    assert res.json() == {
        "company": {
            "code": "test",
            "name": "Test Company",
            "description": "this is a test",
            "invoices": [seed_invoice.id],
            "industries": ["Technology"],
        },
    }


async def test_get_company_lists_every_invoice(client, test_db, seed_company):
    for amt in (10, 20, 30):
        test_db.add(Invoice(comp_code="test", amt=amt))
    await test_db.commit()
    ids = (await test_db.execute(select(Invoice.id))).scalars().all()

    res = await client.get("/companies/test")
    assert sorted(res.json()["company"]["invoices"]) == sorted(ids)
    assert res.json()["company"]["industries"] == []


async def test_get_missing_company_returns_404(client):
    res = await client.get("/companies/fakecompany")
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["message"] == "Company 'fakecompany' not found"


async def test_create_company_returns_201(client):
    res = await client.post("/companies", json={
        "code": "test2", "name": "Test2 company", "description": "another test",
    })
    assert res.status_code == 201
    assert res.json() == {
        "company": {
            "code": "test2",
            "name": "Test2 company",
            "description": "another test",
        },
    }


async def test_create_company_slugifies_code(client):
    res = await client.post("/companies", json={
        "code": "Acme Corp!", "name": "Acme", "description": None,
    })
    assert res.status_code == 201
    assert res.json()["company"]["code"] == "acmecorp"

    fetched = await client.get("/companies/acmecorp")
    assert fetched.status_code == 200


async def test_create_then_get_round_trips(client):
    created = await client.post("/companies", json={
        "code": "globex", "name": "Globex", "description": "Hank Scorpio's",
    })
    fetched = await client.get("/companies/globex")
    body = fetched.json()["company"]
    for key, value in created.json()["company"].items():
        assert body[key] == value


async def test_create_duplicate_company_returns_409(client, seed_company):
    res = await client.post("/companies", json={
        "code": "TEST", "name": "Another", "description": "dup after slugify",
    })
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "CONSTRAINT_VIOLATION"


async def test_create_company_with_unusable_code_returns_400(client):
    res = await client.post("/companies", json={
        "code": "!!!", "name": "Nothing", "description": None,
    })
    assert res.status_code == 400


async def test_create_company_missing_name_returns_400(client):
    res = await client.post("/companies", json={"code": "nameless"})
    assert res.status_code == 400
    fields = [d["field"] for d in res.json()["error"]["details"]]
    assert "body.name" in fields


async def test_update_company(client, seed_company):
    res = await client.put("/companies/test", json={
        "name": "Test company 2.0", "description": "updated test",
    })
    assert res.status_code == 200
    assert res.json() == {
        "company": {
            "code": "test",
            "name": "Test company 2.0",
            "description": "updated test",
        },
    }


async def test_update_missing_company_returns_404(client):
    res = await client.put("/companies/fakecompany", json={
        "name": "Test company 2.0", "description": "updated test",
    })
    assert res.status_code == 404


async def test_delete_company(client, seed_company):
    res = await client.delete("/companies/test")
    assert res.status_code == 200
    assert res.json() == {"status": "Deleted"}


async def test_delete_company_twice_returns_404(client, seed_company):
    first = await client.delete("/companies/test")
    second = await client.delete("/companies/test")
    assert first.status_code == 200
    assert second.status_code == 404


async def test_delete_company_cascades(client, test_db, seed_invoice, linked_industry):
    await client.delete("/companies/test")

    invoices = await test_db.scalar(select(func.count()).select_from(Invoice))
    links = await test_db.scalar(select(func.count()).select_from(CompanyIndustry))
    assert invoices == 0
    assert links == 0

    # Industry itself survives
    res = await client.get("/industries/tech")
    assert res.status_code == 200
    assert res.json()["industry"]["companies"] == []


async def test_associate_industry(client, seed_company, seed_industry):
    res = await client.post("/companies/test/industries", json={"industry_code": "tech"})
    assert res.status_code == 201
    assert res.json() == {
        "company_industry": {"comp_code": "test", "industry_code": "tech"},
    }

    detail = await client.get("/companies/test")
    assert detail.json()["company"]["industries"] == ["Technology"]


async def test_associate_unknown_industry_returns_409(client, seed_company):
    res = await client.post("/companies/test/industries", json={"industry_code": "nope"})
    assert res.status_code == 409
    assert "does not exist" in res.json()["error"]["message"]


async def test_associate_unknown_company_returns_409(client, seed_industry):
    res = await client.post("/companies/ghost/industries", json={"industry_code": "tech"})
    assert res.status_code == 409


async def test_associate_same_industry_twice_returns_409(client, linked_industry):
    res = await client.post("/companies/test/industries", json={"industry_code": "tech"})
    assert res.status_code == 409
    assert "already exists" in res.json()["error"]["message"]


async def test_create_company_with_long_name(client):
    name = "x" * 300
    res = await client.post("/companies", json={
        "code": "longname", "name": name, "description": None,
    })
    assert res.status_code == 201
    assert res.json()["company"]["name"] == name


async def test_create_company_transliterates_code(client):
    res = await client.post("/companies", json={
        "code": "Straße AG", "name": "Straße AG", "description": None,
    })
    assert res.status_code == 201
    assert res.json()["company"]["code"] == "strasseag"
