#!/usr/bin/env python3
"""
Demo scenario for the Registrar platform.

Runs the query engine directly against the bundled dataset, no server needed.
"""

import sys
import os

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from registrar.main import RegistrarPlatform
from registrar.core.enums import EntityType
from registrar.core.exceptions import ResourceNotFoundError


def run_demo():
    """Run a walkthrough of the Registrar queries."""
    print("=" * 60)
    print("REGISTRAR QUERY API - DEMO")
    print("=" * 60)

    platform = RegistrarPlatform()
    engine = platform.engine

    print("\n1. Entity lookups...")
    demonstrate_lookups(engine)

    print("\n2. Relationships...")
    demonstrate_relationships(engine)

    print("\n3. Derived statistics...")
    demonstrate_statistics(engine)

    print("\n4. Dataset statistics...")
    platform.print_summary()

    print("\n" + "=" * 60)
    print("DEMO COMPLETED SUCCESSFULLY!")
    print("=" * 60)


def demonstrate_lookups(engine):
    """Show list-all and get-by-id, including a miss."""
    for entity_type in EntityType:
        records = engine.list_records(entity_type)
        print(f"  {entity_type.value:12} {len(records)} records")

    student = engine.get_record(EntityType.STUDENT, "7")
    print(f"  Student '7' -> {student.full_name}")

    try:
        engine.get_record(EntityType.COURSE, "999")
    except ResourceNotFoundError as e:
        print(f"  Course '999' -> {e.message}")


def demonstrate_relationships(engine):
    """Walk from a student to courses and back."""
    student_id = 1
    courses = engine.student_courses(student_id)
    print(f"  Student {student_id} takes: {[course.code for course in courses if course]}")

    for course in courses:
        if course is None:
            continue
        classmates = [s.full_name for s in engine.course_students(course.id) if s]
        print(f"    {course.code}: {', '.join(classmates)}")

    students = engine.instructor_students(1)
    print(f"  Instructor 1 teaches {len(students)} distinct students")


def demonstrate_statistics(engine):
    """GPA, course averages and a schedule."""
    gpa = engine.student_gpa(7)
    print(f"  GPA: {gpa.to_dict()}")

    for course in engine.list_records(EntityType.COURSE):
        print(f"  Average {course.code}: {engine.course_average(course.id).to_dict()}")

    for entry in engine.student_schedule(7):
        print(f"  Schedule: {entry.to_dict() if entry else None}")


if __name__ == "__main__":
    run_demo()
