"""
End-to-end flow through the HTTP API with the model replaced by a scripted fake.
"""

from pathwayz.errors import TransportError
from pathwayz.schemas import REQUIRED_PROFILE_FIELDS
from pathwayz.script import FINAL_TURN


ASHA = {"name": "Asha", "stage": "Class 12", "locale": "Pune", "language": "English"}


def as_prompt(entry):
    return {
        "type": "prompt",
        "content": entry["narrative"],
        "questionType": entry["questionType"],
        "options": entry.get("options", []),
    }


def as_response(choice):
    return {"type": "response", "content": choice, "selectedOptions": [choice]}


def play_adventure(api, uid):
    """Answer every turn with its first option until the finale; returns the transcript."""
    response = api.post("/game/start", json={"userUid": uid, "userData": ASHA})
    assert response.status_code == 200
    entry = response.json()
    history = [as_prompt(entry)]
    for _ in range(FINAL_TURN * 2):
        if entry["questionType"] == "finale":
            break
        history.append(as_response(entry["options"][0]))
        response = api.post("/game/continue", json={"userUid": uid, "conversationHistory": history})
        assert response.status_code == 200
        entry = response.json()
        history.append(as_prompt(entry))
    return history


class TestCareerQuest:
    def test_full_journey(self, api, scripted_gemini):
        history = play_adventure(api, "asha-1")

        prompts = [h for h in history if h["type"] == "prompt"]
        assert len(prompts) == FINAL_TURN
        assert prompts[0]["questionType"] == "single-choice"
        assert len(prompts[0]["options"]) == 4
        assert "Asha" in prompts[0]["content"] and "Pune" in prompts[0]["content"]
        assert prompts[-1]["questionType"] == "finale"
        assert all(p["questionType"] != "finale" for p in prompts[:-1])

        response = api.post("/profile/generate", json={"userUid": "asha-1", "conversationHistory": history})
        assert response.status_code == 200
        profile = response.json()
        assert all(profile[field] for field in REQUIRED_PROFILE_FIELDS)
        assert api.get("/profile/asha-1").json() == profile

        response = api.post("/careers/generate", json={"userUid": "asha-1", "userProfile": profile})
        assert response.status_code == 200
        advice = response.json()
        assert advice["direction"]
        assert len(advice["paths"]) == 5
        assert api.get("/careers/asha-1").json() == advice

        chosen = advice["paths"][0]
        body = {"userUid": "asha-1", "userProfile": profile, "careerPath": chosen}
        response = api.post("/skills/analyze", json=body)
        assert response.status_code == 200
        analysis = response.json()
        assert 3 <= len(analysis["totalSkills"]) <= 5
        assert len(analysis["skillGap"]) == 2

        calls = scripted_gemini.calls
        again = api.post("/skills/analyze", json=body)
        assert again.json() == analysis
        assert scripted_gemini.calls == calls

        cached = api.get("/skills/asha-1").json()
        assert list(cached) == [chosen["title"]]

    def test_saved_transcript_is_marked_complete(self, api):
        history = play_adventure(api, "asha-2")

        response = api.post("/game/transcript", json={"userUid": "asha-2", "conversationHistory": history})

        assert response.json() == {"ok": True, "completed": True}

    def test_start_uses_stored_intake(self, api, scripted_gemini):
        assert api.post("/users/intake", json={"userUid": "asha-3", "userData": ASHA}).status_code == 200

        response = api.post("/game/start", json={"userUid": "asha-3"})

        assert response.status_code == 200
        assert "Pune" in response.json()["narrative"]
        assert api.get("/users/asha-3").json()["academicStatus"] == "Class 12"

    def test_start_falls_back_when_model_is_down(self, api, scripted_gemini):
        scripted_gemini.responder = lambda prompt: TransportError("down")

        response = api.post("/game/start", json={"userUid": "asha-4", "userData": ASHA})

        assert response.status_code == 200
        assert response.json()["questionType"] == "multi-choice"


class TestErrors:
    def test_start_requires_uid(self, api):
        response = api.post("/game/start", json={"userData": ASHA})

        assert response.status_code == 400
        assert response.json() == {"error": "validation_error", "details": "User UID is required"}

    def test_start_for_unknown_user(self, api):
        response = api.post("/game/start", json={"userUid": "ghost"})

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    def test_continue_without_history(self, api):
        response = api.post("/game/continue", json={"userUid": "u1"})

        assert response.status_code == 400
        assert "must be an array" in response.json()["details"]

    def test_continue_with_non_list_history(self, api):
        response = api.post("/game/continue", json={"userUid": "u1", "conversationHistory": "turn one"})

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    def test_continue_with_unknown_entry_type(self, api):
        history = [{"type": "robot", "content": "beep"}]

        response = api.post("/game/continue", json={"userUid": "u1", "conversationHistory": history})

        assert response.status_code == 400

    def test_careers_reject_incomplete_profile(self, api, sample_profile):
        del sample_profile["keyAptitudes"]

        response = api.post("/careers/generate", json={"userUid": "u1", "userProfile": sample_profile})

        assert response.status_code == 400
        assert response.json()["details"] == "Missing required profile field: keyAptitudes"

    def test_skills_require_path(self, api, sample_profile):
        response = api.post("/skills/analyze", json={"userUid": "u1", "userProfile": sample_profile})

        assert response.status_code == 400
        assert response.json()["details"] == "Career path is required"

    def test_skills_failure_is_reported(self, api, scripted_gemini, sample_profile, sample_advice):
        scripted_gemini.responder = lambda prompt: TransportError("down")
        body = {"userUid": "u1", "userProfile": sample_profile, "careerPath": sample_advice["paths"][0]}

        response = api.post("/skills/analyze", json=body)

        assert response.status_code == 500
        assert response.json() == {"error": "oracle_transport_error", "details": "down"}
        assert api.get("/skills/u1").status_code == 404

    def test_missing_documents(self, api):
        for path in ("/users/nobody", "/profile/nobody", "/careers/nobody", "/skills/nobody"):
            assert api.get(path).status_code == 404
