"""Simulated microservice payloads (camelCase records, as the services emit them)."""

MOCK_DATA = {
    "directory": {
        "users": [
            {
                "id": "user-1",
                "email": "john.doe@acme.com",
                "firstName": "John",
                "lastName": "Doe",
                "organizationId": "org-1",
                "teamId": "team-1",
                "role": "developer",
                "department": "Engineering",
                "status": "active",
                "lastLogin": "2024-01-15T10:30:00Z",
                "profile": {
                    "skills": ["JavaScript", "React", "Node.js"],
                    "experience": "5 years",
                    "certifications": ["AWS Certified Developer"],
                },
            },
            {
                "id": "user-2",
                "email": "jane.smith@techstart.com",
                "firstName": "Jane",
                "lastName": "Smith",
                "organizationId": "org-2",
                "teamId": "team-3",
                "role": "manager",
                "department": "Development",
                "status": "active",
                "lastLogin": "2024-01-15T09:15:00Z",
                "profile": {
                    "skills": ["Python", "Django", "Leadership"],
                    "experience": "8 years",
                    "certifications": ["PMP Certified"],
                },
            },
            {
                "id": "user-3",
                "email": "mike.wilson@global.com",
                "firstName": "Mike",
                "lastName": "Wilson",
                "organizationId": "org-3",
                "teamId": "team-5",
                "role": "analyst",
                "department": "Operations",
                "status": "active",
                "lastLogin": "2024-01-14T16:45:00Z",
                "profile": {
                    "skills": ["Data Analysis", "SQL", "Excel"],
                    "experience": "3 years",
                    "certifications": ["Google Analytics Certified"],
                },
            },
        ],
        "organizations": [
            {"id": "org-1", "name": "Acme Corporation", "status": "active", "userCount": 45},
            {"id": "org-2", "name": "TechStart Inc", "status": "active", "userCount": 32},
            {"id": "org-3", "name": "Global Solutions Ltd", "status": "active", "userCount": 28},
        ],
        "teams": [
            {"id": "team-1", "name": "Engineering", "organizationId": "org-1", "memberCount": 15},
            {"id": "team-2", "name": "Marketing", "organizationId": "org-1", "memberCount": 8},
            {"id": "team-3", "name": "Development", "organizationId": "org-2", "memberCount": 12},
            {"id": "team-4", "name": "Sales", "organizationId": "org-2", "memberCount": 10},
            {"id": "team-5", "name": "Operations", "organizationId": "org-3", "memberCount": 18},
        ],
    },
    "course_builder": {
        "courses": [
            {
                "id": "course-1",
                "title": "JavaScript Fundamentals",
                "organizationId": "org-1",
                "instructorId": "instructor-1",
                "status": "active",
                "enrollmentCount": 25,
                "activeUsers": 18,
                "completionRate": 72,
                "lessons": [
                    {
                        "id": "lesson-1",
                        "title": "Variables and Data Types",
                        "duration": 45,
                        "completionCount": 22,
                        "averageTime": 38,
                    },
                    {
                        "id": "lesson-2",
                        "title": "Functions and Scope",
                        "duration": 60,
                        "completionCount": 19,
                        "averageTime": 52,
                    },
                    {
                        "id": "lesson-3",
                        "title": "DOM Manipulation",
                        "duration": 75,
                        "completionCount": 16,
                        "averageTime": 68,
                    },
                ],
            },
            {
                "id": "course-2",
                "title": "Python for Data Science",
                "organizationId": "org-2",
                "instructorId": "instructor-2",
                "status": "active",
                "enrollmentCount": 18,
                "activeUsers": 15,
                "completionRate": 83,
                "lessons": [
                    {
                        "id": "lesson-4",
                        "title": "Pandas Basics",
                        "duration": 90,
                        "completionCount": 15,
                        "averageTime": 85,
                    },
                    {
                        "id": "lesson-5",
                        "title": "Data Visualization",
                        "duration": 120,
                        "completionCount": 12,
                        "averageTime": 110,
                    },
                ],
            },
        ],
        "enrollments": [
            {"userId": "user-1", "courseId": "course-1", "enrolledAt": "2024-01-01", "status": "active"},
            {"userId": "user-2", "courseId": "course-2", "enrolledAt": "2024-01-05", "status": "completed"},
            {"userId": "user-3", "courseId": "course-1", "enrolledAt": "2024-01-10", "status": "active"},
        ],
    },
    "assessment": {
        "tests": [
            {
                "id": "test-1",
                "courseId": "course-1",
                "title": "JavaScript Fundamentals Quiz",
                "questions": [
                    {
                        "id": "q1",
                        "question": "What is the correct way to declare a variable in JavaScript?",
                        "options": ["var x = 5", "let x = 5", "const x = 5", "All of the above"],
                        "correctAnswer": 3,
                        "difficulty": "easy",
                    },
                    {
                        "id": "q2",
                        "question": "What does DOM stand for?",
                        "options": [
                            "Document Object Model",
                            "Data Object Management",
                            "Dynamic Object Method",
                            "None of the above",
                        ],
                        "correctAnswer": 0,
                        "difficulty": "medium",
                    },
                ],
                "totalAttempts": 45,
                "averageScore": 78,
                "passRate": 85,
            }
        ],
        "attempts": [
            {
                "id": "attempt-1",
                "userId": "user-1",
                "testId": "test-1",
                "score": 85,
                "maxScore": 100,
                "passed": True,
                "attemptNumber": 1,
                "completedAt": "2024-01-15T14:30:00Z",
                "timeSpent": 25,
                "answers": [
                    {"questionId": "q1", "selectedAnswer": 3, "correct": True},
                    {"questionId": "q2", "selectedAnswer": 0, "correct": True},
                ],
            },
            {
                "id": "attempt-2",
                "userId": "user-2",
                "testId": "test-1",
                "score": 92,
                "maxScore": 100,
                "passed": True,
                "attemptNumber": 1,
                "completedAt": "2024-01-14T16:45:00Z",
                "timeSpent": 18,
                "answers": [
                    {"questionId": "q1", "selectedAnswer": 3, "correct": True},
                    {"questionId": "q2", "selectedAnswer": 0, "correct": True},
                ],
            },
        ],
        "feedback": [
            {
                "id": "feedback-1",
                "attemptId": "attempt-1",
                "userId": "user-1",
                "overallFeedback": "Great job! You demonstrated solid understanding of JavaScript fundamentals.",
                "questionFeedback": [
                    {"questionId": "q1", "feedback": "Excellent understanding of variable declaration"},
                    {"questionId": "q2", "feedback": "Perfect! You know what DOM stands for"},
                ],
                "suggestions": [
                    "Consider exploring more advanced JavaScript concepts",
                    "Practice with real-world projects",
                ],
            }
        ],
    },
    "learner_ai": {
        "skills_acquired": [
            {
                "id": "skill-1",
                "userId": "user-1",
                "skillName": "JavaScript Programming",
                "skillLevel": "intermediate",
                "acquiredAt": "2024-01-15T14:30:00Z",
                "courseId": "course-1",
                "confidenceScore": 0.85,
                "evidence": ["Completed JavaScript Fundamentals course", "Passed assessment with 85% score"],
            },
            {
                "id": "skill-2",
                "userId": "user-2",
                "skillName": "Python Data Analysis",
                "skillLevel": "advanced",
                "acquiredAt": "2024-01-14T16:45:00Z",
                "courseId": "course-2",
                "confidenceScore": 0.92,
                "evidence": ["Completed Python for Data Science course", "Passed assessment with 92% score"],
            },
        ],
        "skill_progress": [
            {
                "userId": "user-1",
                "skillName": "JavaScript Programming",
                "progressPercentage": 75,
                "lastUpdated": "2024-01-15T14:30:00Z",
                "milestones": [
                    {"milestone": "Basic Syntax", "completed": True, "completedAt": "2024-01-10"},
                    {"milestone": "Functions", "completed": True, "completedAt": "2024-01-12"},
                    {"milestone": "DOM Manipulation", "completed": False, "targetDate": "2024-01-20"},
                ],
            }
        ],
    },
    "devlab": {
        "exercises": [
            {
                "id": "exercise-1",
                "title": "Build a Calculator",
                "difficulty": "beginner",
                "language": "JavaScript",
                "organizationId": "org-1",
                "participationCount": 15,
                "completionCount": 12,
                "averageTime": 45,
            },
            {
                "id": "exercise-2",
                "title": "Data Analysis with Pandas",
                "difficulty": "intermediate",
                "language": "Python",
                "organizationId": "org-2",
                "participationCount": 8,
                "completionCount": 6,
                "averageTime": 90,
            },
        ],
        "participations": [
            {
                "id": "participation-1",
                "userId": "user-1",
                "exerciseId": "exercise-1",
                "participatedAt": "2024-01-15T10:00:00Z",
                "completed": True,
                "completionTime": 42,
                "difficulty": "beginner",
                "score": 88,
            },
            {
                "id": "participation-2",
                "userId": "user-2",
                "exerciseId": "exercise-2",
                "participatedAt": "2024-01-14T15:30:00Z",
                "completed": True,
                "completionTime": 95,
                "difficulty": "intermediate",
                "score": 92,
            },
        ],
    },
    "learning_analytics": {
        "performance_trends": [
            {
                "organizationId": "org-1",
                "metric": "course_completion_rate",
                "value": 78,
                "trend": "increasing",
                "period": "last_30_days",
                "previousValue": 72,
                "changePercentage": 8.3,
            },
            {
                "organizationId": "org-2",
                "metric": "skill_progression",
                "value": 85,
                "trend": "stable",
                "period": "last_30_days",
                "previousValue": 84,
                "changePercentage": 1.2,
            },
        ],
        "skill_gaps": [
            {
                "organizationId": "org-1",
                "skillName": "Advanced JavaScript",
                "gapPercentage": 35,
                "affectedUsers": 12,
                "recommendedCourses": ["Advanced JavaScript Patterns", "ES6+ Features"],
                "priority": "high",
            },
            {
                "organizationId": "org-3",
                "skillName": "Data Visualization",
                "gapPercentage": 42,
                "affectedUsers": 8,
                "recommendedCourses": ["Tableau Fundamentals", "Power BI Basics"],
                "priority": "medium",
            },
        ],
        "course_effectiveness": [
            {
                "courseId": "course-1",
                "title": "JavaScript Fundamentals",
                "effectivenessScore": 8.5,
                "completionRate": 72,
                "skillImprovement": 15,
                "userSatisfaction": 4.2,
                "recommendations": ["Add more practical exercises", "Include real-world examples"],
            },
            {
                "courseId": "course-2",
                "title": "Python for Data Science",
                "effectivenessScore": 9.1,
                "completionRate": 83,
                "skillImprovement": 22,
                "userSatisfaction": 4.6,
                "recommendations": ["Excellent course structure", "Consider adding advanced topics"],
            },
        ],
        "strategic_forecasts": [
            {
                "organizationId": "org-1",
                "forecast": "skill_demand",
                "skillName": "React Development",
                "predictedDemand": "high",
                "timeframe": "next_6_months",
                "confidence": 0.87,
                "recommendations": ["Increase React training capacity", "Hire additional React instructors"],
            },
            {
                "organizationId": "org-2",
                "forecast": "learning_trends",
                "trend": "microlearning",
                "predictedAdoption": "increasing",
                "timeframe": "next_3_months",
                "confidence": 0.92,
                "recommendations": ["Develop microlearning modules", "Implement bite-sized content strategy"],
            },
        ],
    },
}
