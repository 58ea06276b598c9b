# tests/test_api.py

from decimal import Decimal


# === health / middleware ===


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert "X-Latency-Ms" in response.headers


# === auth ===


def test_login_student(client):
    response = client.post(
        "/api/auth/login",
        json={"email": "jane.smith@student.edu", "password": "password123", "userType": "student"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["userType"] == "student"
    assert body["user"] == {"id": 2, "name": "Jane Smith", "email": "jane.smith@student.edu", "studentId": "STU002"}


def test_login_teacher(client):
    response = client.post(
        "/api/auth/login",
        json={"email": "dr.smith@university.edu", "password": "teacher123", "userType": "teacher"},
    )
    assert response.status_code == 200
    assert response.json()["user"]["department"] == "Mathematics"
    assert "password" not in response.json()["user"]


def test_login_wrong_password(client):
    response = client.post(
        "/api/auth/login",
        json={"email": "dr.smith@university.edu", "password": "teacher124", "userType": "teacher"},
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid credentials"


def test_login_unknown_user_type(client):
    response = client.post(
        "/api/auth/login",
        json={"email": "dr.smith@university.edu", "password": "teacher123", "userType": "admin"},
    )
    assert response.status_code == 400


def test_login_missing_field(client):
    response = client.post("/api/auth/login", json={"email": "dr.smith@university.edu"})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


# === students ===


def test_list_students_without_passwords(client):
    students = client.get("/api/students").json()
    assert [s["studentId"] for s in students] == ["STU001", "STU002", "STU003"]
    assert all("password" not in s for s in students)


def test_get_student(client):
    assert client.get("/api/students/3").json()["name"] == "Bob Johnson"


def test_student_not_found_vs_bad_id(client):
    missing = client.get("/api/students/999")
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "NOT_FOUND"
    assert missing.json()["message"] == "Student not found"

    malformed = client.get("/api/students/abc")
    assert malformed.status_code == 400
    assert malformed.json()["error"]["code"] == "VALIDATION_ERROR"


def test_student_with_results(client):
    body = client.get("/api/students/1/with-results").json()
    assert "password" not in body
    assert len(body["results"]) == 4
    first = body["results"][0]
    assert first["subject"]["code"] == "MATH101"
    assert first["academicYear"] == "2023-2024"
    assert "teacher" not in first
    assert client.get("/api/students/999/with-results").status_code == 404


def test_student_results_with_details(client):
    results = client.get("/api/students/2/results").json()
    assert [r["teacher"]["name"] for r in results] == ["Dr. Smith", "Dr. Johnson"]
    assert client.get("/api/students/999/results").status_code == 404


def test_student_gpa(client):
    body = client.get("/api/students/1/gpa").json()
    assert body["studentId"] == 1
    # 3*4.0 + 4*3.7 + 3*3.3 + 3*3.0 = 45.7 over 13 credits
    assert body["cgpa"] == {"gpa": 3.52, "totalCredits": 13, "totalGradePoints": 45.7}
    assert body["semesters"] == [
        {"semester": 1, "gpa": 3.67, "credits": 10},
        {"semester": 2, "gpa": 3.0, "credits": 3},
    ]


# === teachers / subjects ===


def test_list_teachers(client):
    teachers = client.get("/api/teachers").json()
    assert [t["name"] for t in teachers] == ["Dr. Smith", "Dr. Johnson"]
    assert all("password" not in t for t in teachers)
    assert client.get("/api/teachers/9").status_code == 404


def test_subjects(client):
    assert len(client.get("/api/subjects").json()) == 6
    assert client.get("/api/subjects/2").json()["code"] == "PHYS101"
    assert client.get("/api/subjects/code/CS101").json()["credits"] == 4
    assert client.get("/api/subjects/77").status_code == 404
    assert client.get("/api/subjects/code/XX000").status_code == 404


# === results: search ===


def test_search_all(client):
    assert len(client.get("/api/results").json()) == 7


def test_search_filters_are_anded(client):
    results = client.get("/api/results", params={"studentId": 1, "semester": 1}).json()
    assert [r["subject"]["code"] for r in results] == ["MATH101", "PHYS101", "CHEM101"]

    results = client.get("/api/results", params={"teacherId": 2, "studentId": 1}).json()
    assert [r["id"] for r in results] == [2, 4]
    assert all(r["student"]["name"] == "John Doe" for r in results)


def test_search_by_keyword(client):
    results = client.get("/api/results", params={"q": "math"}).json()
    assert [r["student"]["studentId"] for r in results] == ["STU001", "STU002", "STU003"]


def test_search_rejects_non_numeric_filter(client):
    assert client.get("/api/results", params={"studentId": "abc"}).status_code == 400


def test_results_by_teacher(client):
    results = client.get("/api/results/teacher/1").json()
    assert [r["id"] for r in results] == [1, 3, 5, 7]
    assert client.get("/api/results/teacher/99").json() == []


# === results: create / update / delete ===


def new_result(**overrides):
    body = {
        "studentId": 3,
        "subjectId": 6,
        "grade": "A-",
        "points": "0.00",
        "semester": 2,
        "academicYear": "2024-2025",
        "teacherId": 2,
    }
    body.update(overrides)
    return body


def test_create_result(client):
    response = client.post("/api/results", json=new_result())
    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 8
    assert Decimal(body["points"]) == Decimal("3.70")
    assert body["teacherId"] == 2
    assert len(client.get("/api/results", params={"studentId": 3}).json()) == 2


def test_create_result_validation(client):
    body = new_result()
    del body["grade"]
    assert client.post("/api/results", json=body).status_code == 400
    assert client.post("/api/results", json=new_result(grade="Z")).status_code == 400
    assert client.post("/api/results", json=new_result(semester=0)).status_code == 400
    assert client.post("/api/results", json=new_result(studentId="three")).status_code == 400


def test_create_result_unknown_reference(client):
    response = client.post("/api/results", json=new_result(subjectId=404))
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_REFERENCE"


def test_update_result(client):
    response = client.put("/api/results/1", json={"grade": "B"})
    assert response.status_code == 200
    body = response.json()
    assert Decimal(body["points"]) == Decimal("3.00")
    assert (body["studentId"], body["subjectId"]) == (1, 1)


def test_update_result_keeps_id(client):
    body = client.put("/api/results/1", json={"id": 50, "semester": 4}).json()
    assert body["id"] == 1
    assert body["semester"] == 4


def test_update_missing_result(client):
    response = client.put("/api/results/999", json={"grade": "A"})
    assert response.status_code == 404
    assert response.json()["message"] == "Result not found"


def test_update_invalid_grade(client):
    assert client.put("/api/results/1", json={"grade": "Q"}).status_code == 400


def test_delete_result(client):
    response = client.delete("/api/results/2")
    assert response.status_code == 200
    assert response.json() == {"message": "Result deleted successfully"}
    assert client.delete("/api/results/2").status_code == 404
    assert client.get("/api/results/2").status_code == 404


# === id range / ignored fields ===

TOO_BIG = 2**70


def test_ids_beyond_database_range_are_rejected(client):
    malformed = client.get(f"/api/students/{TOO_BIG}")
    assert malformed.status_code == 400
    assert malformed.json()["error"]["code"] == "VALIDATION_ERROR"

    assert client.delete(f"/api/results/{TOO_BIG}").status_code == 400
    assert client.put(f"/api/results/{TOO_BIG}", json={"grade": "A"}).status_code == 400
    assert client.get("/api/results", params={"studentId": TOO_BIG}).status_code == 400
    assert client.get(f"/api/results/teacher/{TOO_BIG}").status_code == 400
    assert client.post("/api/results", json=new_result(studentId=TOO_BIG)).status_code == 400
    assert client.put("/api/results/1", json={"teacherId": TOO_BIG}).status_code == 400


def test_largest_database_id_is_just_not_found(client):
    response = client.get(f"/api/students/{2**63 - 1}")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


def test_client_points_are_ignored_even_when_garbage(client):
    response = client.post("/api/results", json=new_result(grade="B-", points="abc"))
    assert response.status_code == 201
    assert Decimal(response.json()["points"]) == Decimal("2.70")

    updated = client.put("/api/results/1", json={"points": "not a number"})
    assert updated.status_code == 200
    assert Decimal(updated.json()["points"]) == Decimal("4.00")


def test_method_not_allowed_keeps_allow_header(client):
    response = client.patch("/api/results/1", json={"grade": "A"})
    assert response.status_code == 405
    assert "allow" in response.headers
    assert response.json()["error"]["code"] == "HTTP_ERROR"
