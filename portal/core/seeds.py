"""
SEED SETS

Fixed default collections each entity store falls back to when its
durable snapshot is absent, empty, corrupt or from another version.

Rules:
- Deterministic: same records, same order, every time
  (attendance is relative to a given day, see initial_attendance)
- Persisted (camelCase) form, decoded by the owning store
"""

from datetime import date, timedelta
from typing import Any, Dict, List

INITIAL_JOBS: List[Dict[str, Any]] = [
    {
        "id": "JOB001",
        "title": "Senior Frontend Developer",
        "department": "Technology",
        "location": "Remote",
        "type": "Full-time",
        "description": (
            "Join our dynamic team to build cutting-edge user interfaces with modern "
            "web technologies. You will be responsible for developing and maintaining "
            "web applications, collaborating with UI/UX designers and backend developers."
        ),
        "requirements": (
            "5+ years of experience with React, Next.js, and TypeScript. Strong "
            "understanding of HTML, CSS, and JavaScript. Experience with RESTful APIs "
            "and version control (Git)."
        ),
        "postedDate": "2024-07-20",
        "status": "Open",
        "applicationLink": "https://example.com/apply/frontend-dev",
    },
    {
        "id": "JOB002",
        "title": "Backend Engineer",
        "department": "Technology",
        "location": "Bengaluru",
        "type": "Full-time",
        "description": "Design and operate the services behind the HR portal.",
        "requirements": "3+ years with Node.js or Python, SQL databases and REST API design.",
        "postedDate": "2024-07-25",
        "status": "Open",
        "applicationLink": "https://example.com/apply/backend-engineer",
    },
]

INITIAL_DEPARTMENTS: List[Dict[str, Any]] = [
    {
        "id": "DEPT001",
        "name": "Technology",
        "head": "Dr. Emily Carter",
        "description": "Responsible for software development and IT infrastructure.",
        "creationDate": "2022-01-15",
    },
    {
        "id": "DEPT002",
        "name": "Human Resources",
        "head": "Michael Chen",
        "description": "Manages employee relations, recruitment, and benefits.",
        "creationDate": "2021-03-20",
    },
]

INITIAL_PROJECTS: List[Dict[str, Any]] = [
    {
        "id": "PROJ001",
        "name": "HRMS Portal Development",
        "description": "Build a comprehensive Human Resource Management System portal for PESU Venture Labs.",
        "projectManager": "Rohan Mehra",
        "startDate": "2024-01-10",
        "endDate": "2024-12-31",
        "status": "IN_PROGRESS",
        "teamMembers": "Priya Sharma, Aisha Khan, Suresh Kumar",
    },
]

INITIAL_TASKS: List[Dict[str, Any]] = [
    {
        "id": "TASK001",
        "title": "Design login page",
        "description": "Create the login screen with demo account hints.",
        "assignee": "Priya Sharma",
        "project": "HRMS Portal Development",
        "dueDate": "2024-08-05",
        "status": "Completed",
        "priority": "High",
    },
    {
        "id": "TASK002",
        "title": "Role switcher",
        "description": "Allow elevated users to act as a lower role.",
        "assignee": "Aisha Khan",
        "project": "HRMS Portal Development",
        "dueDate": "2024-08-20",
        "status": "In Progress",
        "priority": "Medium",
    },
    {
        "id": "TASK003",
        "title": "Offer letter templates",
        "description": "Generate offer and joining letters from applicant data.",
        "assignee": "Suresh Kumar",
        "project": "HRMS Portal Development",
        "dueDate": "2024-09-01",
        "status": "To Do",
        "priority": "Low",
    },
]

INITIAL_REIMBURSEMENTS: List[Dict[str, Any]] = [
    {
        "id": "RMB001",
        "employeeName": "Priya Sharma",
        "category": "Travel",
        "amount": 4500.0,
        "currency": "INR",
        "description": "Client visit cab fare",
        "submissionDate": "2024-07-18",
        "status": "Pending",
        "reasonForRejection": None,
        "comments": [],
        "history": [],
    },
    {
        "id": "RMB002",
        "employeeName": "Suresh Kumar",
        "category": "Training",
        "amount": 120.0,
        "currency": "USD",
        "description": "Online course certification",
        "submissionDate": "2024-07-02",
        "status": "Approved",
        "reasonForRejection": None,
        "comments": [],
        "history": [],
    },
]

INITIAL_APPLICANTS: List[Dict[str, Any]] = [
    {"id": "APP001", "jobId": "JOB001", "name": "Chandra Shekhar", "email": "chandra.s@example.com", "assertifyScore": 85, "offerStatus": "Pending", "resumeLink": "/path/to/resume1.pdf", "offeredSalary": None, "offeredStartDate": None, "offerLetterHtml": None},
    {"id": "APP002", "jobId": "JOB001", "name": "Bhavana Reddy", "email": "bhavana.r@example.com", "assertifyScore": 92, "offerStatus": "Selected", "resumeLink": "/path/to/resume2.pdf", "offeredSalary": None, "offeredStartDate": None, "offerLetterHtml": None},
    {"id": "APP003", "jobId": "JOB002", "name": "Karthik Rao", "email": "karthik.r@example.com", "assertifyScore": 78, "offerStatus": "Pending", "resumeLink": "/path/to/resume3.pdf", "offeredSalary": None, "offeredStartDate": None, "offerLetterHtml": None},
    {"id": "APP004", "jobId": "JOB001", "name": "Priya Anand", "email": "priya.a@example.com", "assertifyScore": 88, "offerStatus": "Rejected (Application)", "resumeLink": "/path/to/resume4.pdf", "offeredSalary": None, "offeredStartDate": None, "offerLetterHtml": None},
    {"id": "APP005", "jobId": "JOB002", "name": "Arjun Verma", "email": "arjun.v@example.com", "assertifyScore": 90, "offerStatus": "Offer Generated", "resumeLink": "/path/to/resume5.pdf", "offeredSalary": "₹12,00,000 per annum", "offeredStartDate": "2024-09-01", "offerLetterHtml": "<p>Your mock offer letter content for Arjun Verma.</p>"},
    {"id": "APP006", "jobId": "JOB001", "name": "Sneha Gupta", "email": "sneha.g@example.com", "assertifyScore": 95, "offerStatus": "Offer Sent", "resumeLink": "/path/to/resume6.pdf", "offeredSalary": "₹15,00,000 per annum", "offeredStartDate": "2024-08-15", "offerLetterHtml": "<p>Offer letter for Sneha Gupta.</p>"},
    {"id": "APP007", "jobId": "JOB002", "name": "Ravi Teja", "email": "ravi.t@example.com", "assertifyScore": 82, "offerStatus": "Offer Accepted", "resumeLink": "/path/to/resume7.pdf", "offeredSalary": "₹11,00,000 per annum", "offeredStartDate": "2024-09-10", "offerLetterHtml": "<p>Offer for Ravi Teja.</p>"},
    {"id": "APP008", "jobId": "JOB001", "name": "Anita Desai", "email": "anita.d@example.com", "assertifyScore": 75, "offerStatus": "Hired", "resumeLink": "/path/to/resume8.pdf", "offeredSalary": "₹14,00,000 per annum", "offeredStartDate": "2024-07-01", "offerLetterHtml": "<p>Offer for Anita Desai.</p>"},
]

INITIAL_EMPLOYEES: List[Dict[str, Any]] = [
    {"id": "EMP001", "employeeCode": "EMPVL0001", "name": "Priya Sharma", "email": "priya.sharma@example.com", "role": "employee", "designation": "Software Engineer", "departmentId": "DEPT001", "department": "Technology", "employeeType": "FULL_TIME", "gender": "FEMALE", "joinDate": "2023-04-03", "status": "ACTIVE", "salary": 1200000.0, "avatarUrl": "https://i.pravatar.cc/150?u=priya.sharma@example.com", "reportingManager": "Rohan Mehra", "reportingManagerId": "EMP002", "baseRole": "employee", "currentRole": "employee"},
    {"id": "EMP002", "employeeCode": "EMPVL0002", "name": "Rohan Mehra", "email": "rohan.mehra@example.com", "role": "teamlead", "designation": "Team Lead", "departmentId": "DEPT001", "department": "Technology", "employeeType": "FULL_TIME", "gender": "MALE", "joinDate": "2021-08-16", "status": "ACTIVE", "salary": 2100000.0, "avatarUrl": "https://i.pravatar.cc/150?u=rohan.mehra@example.com", "reportingManager": "Alice Manager", "reportingManagerId": "EMP003", "baseRole": "teamlead", "currentRole": "teamlead"},
    {"id": "EMP003", "employeeCode": "EMPVL0003", "name": "Alice Manager", "email": "alice.manager@example.com", "role": "manager", "designation": "Engineering Manager", "departmentId": "DEPT001", "department": "Technology", "employeeType": "FULL_TIME", "gender": "FEMALE", "joinDate": "2020-01-06", "status": "ACTIVE", "salary": 3000000.0, "avatarUrl": "https://i.pravatar.cc/150?u=alice.manager@example.com", "reportingManager": None, "reportingManagerId": None, "baseRole": "manager", "currentRole": "manager"},
    {"id": "EMP004", "employeeCode": "EMPVL0004", "name": "Suresh Kumar", "email": "suresh.kumar@example.com", "role": "hr", "designation": "HR Executive", "departmentId": "DEPT002", "department": "Human Resources", "employeeType": "FULL_TIME", "gender": "MALE", "joinDate": "2022-06-01", "status": "ACTIVE", "salary": 900000.0, "avatarUrl": "https://i.pravatar.cc/150?u=suresh.kumar@example.com", "reportingManager": None, "reportingManagerId": None, "baseRole": "hr", "currentRole": "hr"},
    {"id": "EMP005", "employeeCode": "EMPVL0005", "name": "Bob Employee", "email": "bob.employee@example.com", "role": "employee", "designation": "INTERN", "departmentId": "DEPT001", "department": "Technology", "employeeType": "INTERN", "gender": "MALE", "joinDate": "2024-06-10", "status": "ACTIVE", "salary": 300000.0, "avatarUrl": "https://i.pravatar.cc/150?u=bob.employee@example.com", "reportingManager": "Rohan Mehra", "reportingManagerId": "EMP002", "baseRole": "employee", "currentRole": "employee"},
]

ATTENDANCE_EMPLOYEE_NAMES = [
    "Alice Wonderland",
    "Bob The Builder",
    "Charlie Chaplin",
    "Admin User",
    "Diana Prince",
    "Edward Scissorhands",
    "Priya Sharma",
    "Rohan Mehra",
]

HOLIDAYS = {"2024-07-04": "Independence Day"}


def _attendance(name: str, day: str, status: str, notes: str, **present: Any) -> Dict[str, Any]:
    return {
        "id": f"{name}@{day}",
        "employeeName": name,
        "date": day,
        "status": status,
        "notes": notes,
        "checkInTimeCategory": present.get("checkInTimeCategory"),
        "workLocation": present.get("workLocation"),
        "userCoordinates": present.get("userCoordinates"),
        "checkOutTimeCategory": present.get("checkOutTimeCategory"),
        "checkOutCoordinates": present.get("checkOutCoordinates"),
    }


def initial_attendance(today: date) -> List[Dict[str, Any]]:
    """Attendance seed: a few recent days for some employees, plus holidays for all."""
    yesterday = (today - timedelta(days=1)).isoformat()
    two_days_ago = (today - timedelta(days=2)).isoformat()

    records: List[Dict[str, Any]] = []
    for name in ATTENDANCE_EMPLOYEE_NAMES:
        if name == "Priya Sharma":
            records.append(_attendance(
                name, yesterday, "Present", "Full day work",
                checkInTimeCategory="Before 9:30 AM",
                workLocation="Office",
                userCoordinates={"latitude": 12.9345, "longitude": 77.5968},
                checkOutTimeCategory="6:00 PM - 7:00 PM",
                checkOutCoordinates={"latitude": 12.9346, "longitude": 77.5969},
            ))
            records.append(_attendance(name, two_days_ago, "Leave", "Personal leave"))
        elif name == "Rohan Mehra":
            records.append(_attendance(
                name, yesterday, "Present", "WFH",
                checkInTimeCategory="9:30 AM - 10:30 AM",
                workLocation="HomeWithPermission",
                userCoordinates={"latitude": 12.9716, "longitude": 77.5946},
                checkOutTimeCategory="After 7:00 PM",
                checkOutCoordinates={"latitude": 12.9717, "longitude": 77.5947},
            ))
        elif name == "Admin User":
            records.append(_attendance(
                name, yesterday, "Present", "Admin present yesterday.",
                checkInTimeCategory="Before 9:30 AM",
                workLocation="Office",
                checkOutTimeCategory="6:00 PM - 7:00 PM",
            ))

        for day, occasion in HOLIDAYS.items():
            if not any(r["id"] == f"{name}@{day}" for r in records):
                records.append(_attendance(name, day, "Holiday", occasion))

    return records
