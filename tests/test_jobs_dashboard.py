from datetime import datetime


def test_public_job_listing_hides_inactive(client, make_job):
    make_job(title="Open role")
    make_job(title="Closed role", is_active=False)
    titles = [j["title"] for j in client.get('/jobs').get_json()["jobs"]]
    assert titles == ["Open role"]


def test_apply_page_for_closed_job(client, make_job):
    job_id = make_job(is_active=False)
    resp = client.get(f'/apply/{job_id}')
    assert resp.status_code == 409
    assert client.get('/apply/missing').status_code == 404


def test_apply_once(client, make_job, login_as):
    job_id = make_job()
    login_as("job_seeker")
    resp = client.post(f'/apply/{job_id}', json={"cover_letter": "Hello"})
    assert resp.status_code == 201
    assert resp.get_json()["application"]["status"] == "pending"

    resp = client.post(f'/apply/{job_id}', json={"cover_letter": "Again"})
    assert resp.status_code == 409


def test_apply_requires_job_seeker(client, make_job, login_as):
    job_id = make_job()
    assert client.post(f'/apply/{job_id}', json={}).status_code == 401
    login_as("interviewer")
    assert client.post(f'/apply/{job_id}', json={}).status_code == 403


def test_dashboard_limits_jobs_and_links_interviews(app, client, make_job, make_candidate, make_interview,
                                                    login_as):
    app.config['DASHBOARD_JOBS_LIMIT'] = 2
    for day in range(1, 4):
        make_job(title=f"Job {day}", created_at=datetime(2026, 1, day))
    cand_id = make_candidate(name="Seeker", email="job_seeker@example.com")
    make_interview(candidate_id=cand_id, candidate_name="Seeker")

    user_id = login_as("job_seeker")
    job_id = client.get('/jobs').get_json()["jobs"][0]["id"]
    client.post(f'/apply/{job_id}', json={})

    data = client.get('/dashboard').get_json()
    assert [j["title"] for j in data["jobs"]] == ["Job 3", "Job 2"]
    assert data["applications"][0]["job"]["title"] == "Job 3"
    assert len(data["interviews"]) == 1
    assert data["interviews"][0]["user_id"] == user_id


def test_dashboard_with_no_interviews(client, login_as):
    login_as("job_seeker")
    data = client.get('/dashboard').get_json()
    assert data["interviews"] == []
