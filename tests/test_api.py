"""
Tests for the HTTP API.

Runs the real application against the in-memory store through
FastAPI's TestClient. Validates status codes, the result envelope,
gate error mapping and security headers.
"""

from backlog.domain.catalog.entities import Visibility

API = "/api/v1"

PUBLISHER = {"name": "Nintendo", "description": "Kyoto publisher", "cover_image": "n.png"}
FRANCHISE = {"name": "Metroid", "description": "Sci-fi series", "background_image": "m.png"}


class TestHealthEndpoint:
    """Tests for GET /api/v1/health."""

    def test_reports_ok(self, client) -> None:
        response = client.get(f"{API}/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": "0.1.0", "database": "up"}


class TestCrudEndpoints:
    """Tests for the shared CRUD routes."""

    def test_create_as_admin(self, client, admin_headers) -> None:
        response = client.post(f"{API}/publishers", json=PUBLISHER, headers=admin_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["ok"] is True
        assert body["value"]["id"]
        assert body["value"]["name"] == PUBLISHER["name"]

    def test_create_anonymous_is_401(self, client) -> None:
        response = client.post(f"{API}/publishers", json=PUBLISHER)

        assert response.status_code == 401
        assert response.json()["error"] == "Unauthorized"
        assert response.headers["www-authenticate"] == "Bearer"

    def test_create_as_user_is_403(self, client, user_headers) -> None:
        response = client.post(f"{API}/publishers", json=PUBLISHER, headers=user_headers)

        assert response.status_code == 403
        assert response.json()["error"] == "Forbidden"

    def test_invalid_token_counts_as_anonymous(self, client) -> None:
        response = client.post(
            f"{API}/publishers",
            json=PUBLISHER,
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401

    def test_validation_error_is_422(self, client, admin_headers) -> None:
        response = client.post(
            f"{API}/publishers", json={**PUBLISHER, "name": ""}, headers=admin_headers
        )

        assert response.status_code == 422

    def test_get_missing_is_404_envelope(self, client) -> None:
        response = client.get(f"{API}/publishers/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {
            "ok": False,
            "error": {"code": "NOT_FOUND", "message": "Publisher not found"},
        }

    def test_list_empty(self, client) -> None:
        response = client.get(f"{API}/genres")

        assert response.status_code == 200
        assert response.json() == {"ok": True, "value": []}

    def test_duplicate_is_400_without_cause(self, client, admin_headers) -> None:
        client.post(f"{API}/publishers", json=PUBLISHER, headers=admin_headers)

        response = client.post(f"{API}/publishers", json=PUBLISHER, headers=admin_headers)

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "BAD_REQUEST"
        assert "cause" not in error
        assert "UNIQUE" in error["message"]
        assert "[SQL:" not in error["message"]
        assert "INSERT" not in error["message"]

    def test_update_and_delete(self, client, admin_headers) -> None:
        created = client.post(f"{API}/franchises", json=FRANCHISE, headers=admin_headers).json()
        franchise_id = created["value"]["id"]

        updated = client.put(
            f"{API}/franchises/{franchise_id}",
            json={**FRANCHISE, "description": "Bounty hunter"},
            headers=admin_headers,
        )
        deleted = client.delete(f"{API}/franchises/{franchise_id}", headers=admin_headers)
        missing = client.get(f"{API}/franchises/{franchise_id}", headers=admin_headers)

        assert updated.status_code == 200
        assert updated.json()["value"]["description"] == "Bounty hunter"
        assert deleted.status_code == 200
        assert deleted.json()["value"]["description"] == "Bounty hunter"
        assert missing.status_code == 404

    def test_franchise_reads_need_a_session(self, client, user_headers) -> None:
        assert client.get(f"{API}/franchises").status_code == 401
        assert client.get(f"{API}/franchises", headers=user_headers).status_code == 200


class TestGameEndpoints:
    """Tests for games and their catalog links."""

    def test_game_with_unknown_franchise_is_400(self, client, admin_headers, publisher) -> None:
        response = client.post(
            f"{API}/games",
            json={
                "name": "Prime",
                "description": "First person",
                "cover_image": "c.png",
                "background_image": "b.png",
                "release_date": "2002-11-17",
                "franchise_id": "missing",
                "publisher_id": publisher.id,
            },
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "BAD_REQUEST"

    def test_developer_games(self, client, admin_headers, make_game) -> None:
        game = make_game()
        developer = client.post(
            f"{API}/developers",
            json={"name": "Retro Studios", "description": "Austin studio", "image": "r.png"},
            headers=admin_headers,
        ).json()["value"]

        linked = client.post(
            f"{API}/developers/{developer['id']}/games",
            json={"game_ids": [game.id]},
            headers=admin_headers,
        )
        listed = client.get(f"{API}/games/{game.id}/developers")
        unlinked = client.request(
            "DELETE",
            f"{API}/developers/{developer['id']}/games",
            json={"game_ids": [game.id]},
            headers=admin_headers,
        )

        assert linked.status_code == 200
        assert [g["id"] for g in linked.json()["value"]["games"]] == [game.id]
        assert linked.json()["value"]["games"][0]["release_date"] == "2017-03-03"
        assert [d["id"] for d in listed.json()["value"]] == [developer["id"]]
        assert unlinked.json()["value"]["games"] == []

    def test_delete_developer_with_linked_games(self, client, admin_headers, make_game) -> None:
        game = make_game()
        developer = client.post(
            f"{API}/developers",
            json={"name": "Retro Studios", "description": "Austin studio", "image": "r.png"},
            headers=admin_headers,
        ).json()["value"]
        client.post(
            f"{API}/developers/{developer['id']}/games",
            json={"game_ids": [game.id]},
            headers=admin_headers,
        )

        deleted = client.delete(f"{API}/developers/{developer['id']}", headers=admin_headers)

        assert deleted.status_code == 200
        assert deleted.json()["value"]["id"] == developer["id"]
        assert client.get(f"{API}/games/{game.id}/developers").json()["value"] == []

    def test_feature_and_genre_links(self, client, admin_headers, make_game) -> None:
        game = make_game()
        feature = client.post(
            f"{API}/features",
            json={"name": "Co-op", "description": "Play together", "image": "coop.png"},
            headers=admin_headers,
        )
        genre = client.post(
            f"{API}/genres", json={"name": "Action", "description": "Fast"}, headers=admin_headers
        ).json()["value"]

        client.post(
            f"{API}/features/{feature.json()['value']['id']}/games",
            json={"game_ids": [game.id]},
            headers=admin_headers,
        )
        linked = client.post(
            f"{API}/genres/{genre['id']}/games",
            json={"game_ids": [game.id]},
            headers=admin_headers,
        )

        assert feature.status_code == 201
        assert linked.json()["value"]["entity"]["id"] == genre["id"]
        features = client.get(f"{API}/games/{game.id}/features").json()["value"]
        genres = client.get(f"{API}/games/{game.id}/genres").json()["value"]
        platforms = client.get(f"{API}/games/{game.id}/platforms").json()["value"]
        assert [f["name"] for f in features] == ["Co-op"]
        assert [g["id"] for g in genres] == [genre["id"]]
        assert platforms == []

    def test_game_details(self, client, user_headers, make_game, franchise) -> None:
        game = make_game()
        client.post(
            f"{API}/reviews",
            json={"game_id": game.id, "rating": 5, "content": "Loved it"},
            headers=user_headers,
        )

        response = client.get(f"{API}/games/{game.id}/details")
        missing = client.get(f"{API}/games/missing/details")

        assert response.status_code == 200
        details = response.json()["value"]
        assert details["game"]["id"] == game.id
        assert details["franchise"]["id"] == franchise.id
        assert details["review_count"] == 1
        assert [r["content"] for r in details["top_reviews"]] == ["Loved it"]
        assert missing.status_code == 404


class TestPlaylistEndpoints:
    """Tests for the playlist routes."""

    def test_like_flow(self, client, other_user_headers, make_playlist) -> None:
        playlist = make_playlist()

        liked = client.post(f"{API}/playlists/{playlist.id}/like", headers=other_user_headers)
        unliked = client.delete(f"{API}/playlists/{playlist.id}/like", headers=other_user_headers)
        again = client.delete(f"{API}/playlists/{playlist.id}/like", headers=other_user_headers)

        assert liked.status_code == 200
        assert liked.json()["value"]["like_count"] == 1
        assert unliked.json()["value"]["like_count"] == 0
        assert again.status_code == 404

    def test_like_anonymous_is_401(self, client, make_playlist) -> None:
        playlist = make_playlist()

        assert client.post(f"{API}/playlists/{playlist.id}/like").status_code == 401

    def test_private_playlist_hidden(
        self, client, user_headers, other_user_headers, make_playlist
    ) -> None:
        playlist = make_playlist(visibility=Visibility.PRIVATE)

        assert client.get(f"{API}/playlists/{playlist.id}", headers=user_headers).status_code == 200
        assert (
            client.get(f"{API}/playlists/{playlist.id}", headers=other_user_headers).status_code
            == 404
        )

    def test_add_games_and_details(self, client, user_headers, make_playlist, make_game) -> None:
        playlist = make_playlist()
        game = make_game()

        added = client.post(
            f"{API}/playlists/{playlist.id}/games",
            json={"game_ids": [game.id]},
            headers=user_headers,
        )
        details = client.get(f"{API}/playlists/{playlist.id}/details")

        assert added.status_code == 200
        assert details.json()["value"]["games"][0] == {
            "game_id": game.id,
            "order": 0,
            "added_at": added.json()["value"]["games"][0]["added_at"],
        }

    def test_reorder_games(self, client, user_headers, make_playlist, make_game) -> None:
        playlist = make_playlist()
        first, second = make_game("First"), make_game("Second")
        client.post(
            f"{API}/playlists/{playlist.id}/games",
            json={"game_ids": [first.id, second.id]},
            headers=user_headers,
        )

        moved = client.put(
            f"{API}/playlists/{playlist.id}/games/{second.id}/order",
            json={"order": 0},
            headers=user_headers,
        )
        negative = client.put(
            f"{API}/playlists/{playlist.id}/games/{second.id}/order",
            json={"order": -1},
            headers=user_headers,
        )
        outside = client.put(
            f"{API}/playlists/{playlist.id}/games/missing/order",
            json={"order": 0},
            headers=user_headers,
        )

        assert moved.status_code == 200
        assert [g["game_id"] for g in moved.json()["value"]["games"]] == [second.id, first.id]
        assert negative.status_code == 422
        assert outside.status_code == 404

    def test_empty_game_ids_is_422(self, client, user_headers, make_playlist) -> None:
        playlist = make_playlist()

        response = client.post(
            f"{API}/playlists/{playlist.id}/games", json={"game_ids": []}, headers=user_headers
        )

        assert response.status_code == 422

    def test_soft_delete_and_trash(self, client, admin_headers, user_headers) -> None:
        created = client.post(
            f"{API}/playlists",
            json={"name": "Retro", "visibility": "PUBLIC"},
            headers=admin_headers,
        ).json()["value"]

        deleted = client.delete(f"{API}/playlists/{created['id']}", headers=admin_headers)
        listed = client.get(f"{API}/playlists")
        trash = client.get(f"{API}/playlists/deleted", headers=admin_headers)
        trash_as_user = client.get(f"{API}/playlists/deleted", headers=user_headers)
        update = client.put(
            f"{API}/playlists/{created['id']}", json={"name": "Back"}, headers=admin_headers
        )

        assert created["type"] == "CUSTOM"
        assert deleted.status_code == 200
        assert deleted.json()["value"]["deleted"] is None
        assert listed.json()["value"] == []
        assert [p["id"] for p in trash.json()["value"]] == [created["id"]]
        assert trash.json()["value"][0]["deleted"] is not None
        assert trash_as_user.status_code == 403
        assert update.status_code == 404


class TestCommunityEndpoints:
    """Tests for reviews and comments."""

    def test_review_ownership(self, client, user_headers, other_user_headers, make_game) -> None:
        game = make_game()
        review = client.post(
            f"{API}/reviews",
            json={"game_id": game.id, "rating": 5, "content": "Loved it"},
            headers=user_headers,
        ).json()["value"]

        forbidden = client.put(
            f"{API}/reviews/{review['id']}",
            json={"rating": 1, "content": "Hated it"},
            headers=other_user_headers,
        )
        allowed = client.put(
            f"{API}/reviews/{review['id']}",
            json={"rating": 4, "content": "Liked it"},
            headers=user_headers,
        )

        assert review["user_id"] == "user-1"
        assert forbidden.status_code == 403
        assert allowed.json()["value"]["rating"] == 4

    def test_rating_out_of_range_is_422(self, client, user_headers) -> None:
        response = client.post(
            f"{API}/reviews",
            json={"game_id": "g", "rating": 9, "content": "Off the scale"},
            headers=user_headers,
        )

        assert response.status_code == 422

    def test_comment_soft_delete(self, client, user_headers, make_game) -> None:
        game = make_game()
        review = client.post(
            f"{API}/reviews",
            json={"game_id": game.id, "rating": 3, "content": "Fine"},
            headers=user_headers,
        ).json()["value"]
        comment = client.post(
            f"{API}/comments",
            json={"review_id": review["id"], "content": "Me too"},
            headers=user_headers,
        ).json()["value"]

        deleted = client.delete(f"{API}/comments/{comment['id']}", headers=user_headers)

        assert deleted.status_code == 200
        assert client.get(f"{API}/comments/{comment['id']}").status_code == 404
        assert client.get(f"{API}/comments").json()["value"] == []


    def test_review_likes(self, client, user_headers, other_user_headers, make_game) -> None:
        review = client.post(
            f"{API}/reviews",
            json={"game_id": make_game().id, "rating": 4, "content": "Solid"},
            headers=user_headers,
        ).json()["value"]

        liked = client.post(f"{API}/reviews/{review['id']}/like", headers=other_user_headers)
        again = client.post(f"{API}/reviews/{review['id']}/like", headers=other_user_headers)
        anonymous = client.post(f"{API}/reviews/{review['id']}/like")
        unliked = client.delete(f"{API}/reviews/{review['id']}/like", headers=other_user_headers)

        assert liked.status_code == 200
        assert liked.json()["value"]["like_count"] == 1
        assert liked.json()["value"]["entity"]["id"] == review["id"]
        assert again.status_code == 400
        assert anonymous.status_code == 401
        assert unliked.json()["value"]["like_count"] == 0

    def test_comment_details(self, client, user_headers, other_user_headers, make_game) -> None:
        review = client.post(
            f"{API}/reviews",
            json={"game_id": make_game().id, "rating": 4, "content": "Solid"},
            headers=user_headers,
        ).json()["value"]
        root = client.post(
            f"{API}/comments",
            json={"review_id": review["id"], "content": "Root"},
            headers=user_headers,
        ).json()["value"]
        reply = client.post(
            f"{API}/comments",
            json={"review_id": review["id"], "content": "Reply", "parent_id": root["id"]},
            headers=other_user_headers,
        ).json()["value"]
        client.post(f"{API}/comments/{root['id']}/like", headers=other_user_headers)

        details = client.get(f"{API}/comments/{root['id']}/details").json()["value"]

        assert details["comment"]["id"] == root["id"]
        assert details["parent"] is None
        assert details["like_count"] == 1
        assert [c["id"] for c in details["replies"]] == [reply["id"]]

    def test_delete_review_with_comments(self, client, user_headers, make_game) -> None:
        review = client.post(
            f"{API}/reviews",
            json={"game_id": make_game().id, "rating": 2, "content": "Meh"},
            headers=user_headers,
        ).json()["value"]
        comment = client.post(
            f"{API}/comments",
            json={"review_id": review["id"], "content": "Agreed"},
            headers=user_headers,
        ).json()["value"]
        client.delete(f"{API}/comments/{comment['id']}", headers=user_headers)

        deleted = client.delete(f"{API}/reviews/{review['id']}", headers=user_headers)

        assert deleted.status_code == 200
        assert client.get(f"{API}/reviews/{review['id']}").status_code == 404


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self, client) -> None:
        response = client.get(f"{API}/health")

        assert response.headers["x-content-type-options"] == "nosniff"
        assert response.headers["x-frame-options"] == "DENY"
        assert "content-security-policy" in response.headers
        assert "cache-control" not in response.headers

    def test_authenticated_responses_not_cached(self, client, user_headers) -> None:
        response = client.get(f"{API}/genres", headers=user_headers)

        assert response.headers["cache-control"] == "no-store"
