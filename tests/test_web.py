"""Tests for the HTML interface and redirects."""

import logging

import pytest

from shortlinks.database.models import Link


@pytest.mark.asyncio
class TestHomepage:
    """Test listing and messages."""
    
    async def test_empty_homepage(self, client):
        response = await client.get("/")
        
        assert response.status_code == 200
        assert "No short links yet." in response.text
    
    async def test_lists_links(self, client, service, sample_urls):
        await service.register(Link(url=sample_urls[0]))
        
        response = await client.get("/")
        
        assert "sbxmplpti" in response.text
        assert sample_urls[0] in response.text
        assert 'action="/sbxmplpti/delete"' in response.text
    
    async def test_unknown_message_key_is_ignored(self, client):
        response = await client.get("/?msg=<script>")
        
        assert response.status_code == 200
        assert "<script>" not in response.text
    
    async def test_forwarded_prefix_in_forms(self, client):
        response = await client.get("/", headers={"X-Forwarded-Prefix": "/l"})
        
        assert 'action="/l/"' in response.text
        assert 'href="/l/css/style.css"' in response.text


@pytest.mark.asyncio
class TestSubmitLink:
    """Test form submission."""
    
    async def test_accepted_redirects_home(self, client, store):
        response = await client.post("/", data={"url": "http://a.com", "abbreviation": ""})
        
        assert response.status_code == 303
        assert response.headers["location"] == "/?msg=created&abbreviation=cm"
        assert await store.exists_by_abbreviation("cm")
    
    async def test_success_message_after_redirect(self, client):
        response = await client.post("/", data={"url": "http://a.com"}, follow_redirects=True)
        
        assert response.status_code == 200
        assert "Successfully added a new short link!" in response.text
        assert "http://testserver/cm" in response.text
    
    async def test_invalid_url_rerenders_form(self, client, store):
        response = await client.post("/", data={"url": "ftp://files.example.com", "abbreviation": "files"})
        
        assert response.status_code == 400
        assert "URL must use http or https protocol" in response.text
        assert 'value="ftp://files.example.com"' in response.text
        assert 'value="files"' in response.text
        assert await store.find_all() == []
    
    async def test_duplicate_url_shows_existing_abbreviation(self, client, sample_urls):
        await client.post("/", data={"url": sample_urls[0]})
        
        response = await client.post("/", data={"url": sample_urls[0]})
        
        assert response.status_code == 400
        assert "The URL already is abbreviated with: sbxmplpti" in response.text
    
    async def test_taken_abbreviation(self, client, sample_urls):
        await client.post("/", data={"url": sample_urls[0], "abbreviation": "mine"})
        
        response = await client.post("/", data={"url": sample_urls[1], "abbreviation": "mine"})
        
        assert response.status_code == 409
        assert "The short link already exists. Try another one." in response.text
        assert f'value="{sample_urls[1]}"' in response.text
    
    async def test_messages_do_not_leak_between_requests(self, client, sample_urls):
        await client.post("/", data={"url": sample_urls[0], "abbreviation": "mine"})
        await client.post("/", data={"url": sample_urls[1], "abbreviation": "mine"})
        
        response = await client.get("/")
        
        assert "already exists" not in response.text
        assert sample_urls[1] not in response.text


@pytest.mark.asyncio
class TestRedirect:
    """Test the redirect resolver route."""
    
    async def test_redirects_to_url(self, client, service, sample_urls):
        await service.register(Link(url=sample_urls[1], abbreviation="repo"))
        
        response = await client.get("/repo")
        
        assert response.status_code == 302
        assert response.headers["location"] == sample_urls[1]
    
    async def test_unknown_goes_home(self, client):
        response = await client.get("/unknown-key")
        
        assert response.status_code == 302
        assert response.headers["location"] == "/"
    
    async def test_unknown_goes_home_behind_proxy(self, client):
        response = await client.get("/unknown-key", headers={"X-Forwarded-Prefix": "/l"})
        
        assert response.headers["location"] == "/l/"
    
    async def test_health(self, client):
        response = await client.get("/health")
        
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
    
    async def test_generated_link_does_not_shadow_health(self, client, service):
        await service.register(Link(url="http://a.io/h/e/a/l/t/h"))
        
        redirect = await client.get("/health1")
        health = await client.get("/health")
        
        assert redirect.status_code == 302
        assert redirect.headers["location"] == "http://a.io/h/e/a/l/t/h"
        assert health.json() == {"status": "healthy"}

    
    async def test_redirect_is_logged(self, client, service, sample_urls, caplog):
        await service.register(Link(url=sample_urls[1], abbreviation="repo"))
        caplog.set_level(logging.INFO, logger="link_shortener.web")
        
        await client.get("/repo")
        
        lines = [r.getMessage() for r in caplog.records if r.name == "link_shortener.web"]
        assert any("GET /repo 302" in line and line.endswith(f"-> {sample_urls[1]}") for line in lines)

@pytest.mark.asyncio
class TestDeleteLink:
    """Test deletion from the HTML interface."""
    
    async def test_delete_existing(self, client, service, store, sample_urls):
        await service.register(Link(url=sample_urls[0]))
        
        response = await client.post("/sbxmplpti/delete")
        
        assert response.status_code == 303
        assert response.headers["location"] == "/?msg=deleted"
        assert not await store.exists_by_abbreviation("sbxmplpti")
    
    async def test_delete_missing(self, client):
        response = await client.post("/missing/delete", follow_redirects=True)
        
        assert response.status_code == 200
        assert "could not be deleted" in response.text
