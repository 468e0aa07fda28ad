"""
Script to walk the read endpoints of a running Registrar server.
Make sure the server is running before executing this script.

Usage:
    python query_api.py [student_id] [course_id] [instructor_id]
"""

import requests
import json
import sys
import os


def _console_supports_utf8() -> bool:
    enc = getattr(sys.stdout, "encoding", None)
    return enc is not None and "utf" in enc.lower()


_OK_CHAR = "✓" if _console_supports_utf8() else "[OK]"
_FAIL_CHAR = "✗" if _console_supports_utf8() else "[FAIL]"
_INFO_CHAR = "ℹ" if _console_supports_utf8() else "[INFO]"


def _detect_base_url() -> str:
    """Determine a reachable BASE_URL.

    Priority: environment variable `REGISTRAR_BASE_URL`, then common local ports.
    If nothing responds, fall back to http://127.0.0.1:5000.
    """
    env = os.environ.get("REGISTRAR_BASE_URL")
    if env:
        return env

    candidates = [
        "http://127.0.0.1:5000",
        "http://127.0.0.1:8000",
        "http://localhost:5000",
        "http://localhost:8000",
    ]

    for c in candidates:
        try:
            resp = requests.get(f"{c}/health", timeout=0.5)
            if resp.status_code == 200:
                return c
        except requests.exceptions.RequestException:
            continue

    return candidates[0]


BASE_URL = _detect_base_url()


def check_server():
    """Check if the server is running."""
    try:
        response = requests.get(f"{BASE_URL}/health", timeout=2)
        if response.status_code == 200:
            print(f"{_OK_CHAR} Server is running at {BASE_URL}")
            return True
    except requests.exceptions.RequestException:
        pass
    print(f"{_FAIL_CHAR} Server is not running!")
    print("\nPlease start the server first:")
    print("  python -m registrar --port 5000")
    return False


def fetch(path):
    """GET one endpoint and print a status line. Returns the decoded body."""
    url = f"{BASE_URL}{path}"
    try:
        response = requests.get(url, timeout=5)
    except requests.exceptions.RequestException as e:
        print(f"{_FAIL_CHAR} {path}: {e}")
        return None

    body = response.json()
    if response.status_code == 200:
        size = f"{len(body)} items" if isinstance(body, list) else "object"
        print(f"{_OK_CHAR} {path:40} {response.status_code} ({size})")
    else:
        print(f"{_INFO_CHAR} {path:40} {response.status_code} {body.get('message', '')}")
    return body


def list_students():
    """List all students."""
    students = fetch("/api/students") or []
    print(f"\n{'='*60}")
    print(f"Students ({len(students)})")
    print(f"{'='*60}")
    for student in students:
        print(f"  {student['id']!s:6} | {student.get('firstName', '')} {student.get('lastName', ''):15} | GPA {student.get('gpa')}")
    return students


def list_courses():
    """List all courses."""
    courses = fetch("/api/courses") or []
    print(f"\n{'='*60}")
    print(f"Courses ({len(courses)})")
    print(f"{'='*60}")
    for course in courses:
        print(f"  {course.get('code', ''):10} | {course.get('name', ''):35} | {course.get('schedule', '')}")
    return courses


def main():
    """Main execution."""
    args = sys.argv[1:]
    student_id = args[0] if len(args) > 0 else "1"
    course_id = args[1] if len(args) > 1 else "101"
    instructor_id = args[2] if len(args) > 2 else "1"

    print("="*60)
    print("Registrar - Endpoint Walkthrough")
    print("="*60)
    print()

    if not check_server():
        sys.exit(1)

    print()
    for collection in ("students", "instructors", "courses", "enrollments", "assignments", "grades"):
        fetch(f"/api/{collection}")

    print()
    fetch(f"/api/students/{student_id}")
    fetch(f"/api/students/{student_id}/enrollments")
    fetch(f"/api/students/{student_id}/courses")
    fetch(f"/api/courses/{course_id}/students")
    fetch(f"/api/instructors/{instructor_id}/courses")
    fetch(f"/api/courses/{course_id}/assignments")

    print()
    gpa = fetch(f"/api/students/{student_id}/gpa")
    average = fetch(f"/api/courses/{course_id}/average")
    fetch(f"/api/instructors/{instructor_id}/students")
    schedule = fetch(f"/api/students/{student_id}/schedule")

    list_students()
    list_courses()

    print(f"\n{'='*60}")
    print("Derived statistics")
    print(f"{'='*60}")
    print(json.dumps({"gpa": gpa, "average": average, "schedule": schedule}, indent=2))
    print()

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print(f"\n\n{_FAIL_CHAR} Interrupted by user")
        sys.exit(1)
