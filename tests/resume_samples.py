"""Cross-industry resume panel shared by the scoring and API tests."""

import copy

TECH_ENGINEER_RESUME = {
    "header": {
        "name": "Sarah Chen",
        "title": "Senior Software Engineer",
        "email": "sarah.chen@tech.com",
        "phone": "+1 (555) 123-4567",
        "location": "San Francisco, CA",
        "linkedin": "linkedin.com/in/sarah-chen",
    },
    "summary": (
        "Senior software engineer with 8+ years building scalable systems at Fortune 500 tech companies. "
        "Expertise in cloud architecture, microservices, and team leadership. "
        "Passionate about mentoring engineers and driving technical excellence."
    ),
    "experience": [
        {
            "role": "Senior Software Engineer",
            "company_or_client": "TechCorp Inc",
            "start_date": "Jan 2022",
            "end_date": "Present",
            "location": "San Francisco, CA",
            "bullets": [
                "Led architecture redesign for microservices platform, reducing latency by 40% and supporting 10M+ daily requests",
                "Mentored team of 6 junior engineers, conducting weekly code reviews and technical workshops",
                "Implemented automated testing pipeline improving deployment frequency from weekly to daily releases",
                "Designed and deployed Kubernetes infrastructure managing 50+ containerized services across 3 regions",
                "Collaborated with product team to deliver 12 major features, each impacting 2M+ active users",
            ],
        },
        {
            "role": "Software Engineer II",
            "company_or_client": "CloudStart Systems",
            "start_date": "Jun 2019",
            "end_date": "Dec 2021",
            "location": "Mountain View, CA",
            "bullets": [
                "Developed real-time analytics engine processing 500K events/second using Apache Kafka and Apache Spark",
                "Optimized database queries reducing average response time from 2s to 200ms across 15 mission-critical endpoints",
                "Built CI/CD pipeline using Jenkins and Docker, increasing developer productivity by 35%",
                "Implemented comprehensive monitoring using Prometheus and Grafana across entire infrastructure",
            ],
        },
    ],
    "education": [
        {
            "degree": "Bachelor's",
            "field": "Computer Science",
            "institution": "UC Berkeley",
            "gpa": "3.8",
            "graduation_date": "May 2018",
            "location": "Berkeley, CA",
        }
    ],
    "certifications": [
        {"name": "AWS Certified Solutions Architect Professional", "issuer": "Amazon Web Services", "date": "2021"},
        {"name": "Kubernetes Application Developer", "issuer": "Linux Foundation", "date": "2022"},
    ],
    "skills": {
        "programming_languages": ["Python", "Java", "Go", "TypeScript", "SQL"],
        "frameworks": ["Spring Boot", "FastAPI", "React", "Node.js"],
        "cloud_mlops": ["AWS", "Google Cloud", "Kubernetes", "Docker"],
        "databases": ["PostgreSQL", "MongoDB", "Redis", "Elasticsearch"],
        "devops": ["Jenkins", "GitLab CI", "Terraform", "Ansible"],
        "big_data": ["Apache Kafka", "Apache Spark", "Hadoop"],
    },
    "projects": [
        {
            "title": "Distributed Cache Layer",
            "organization": "TechCorp",
            "date": "2023",
            "bullets": [
                "Architected distributed cache reducing database load by 70%",
                "Improved application throughput from 1K to 50K requests/second",
            ],
        }
    ],
}

FINANCE_ANALYST_RESUME = {
    "header": {
        "name": "Michael Rodriguez",
        "title": "Senior Financial Analyst",
        "email": "m.rodriguez@finance.com",
        "phone": "+1 (555) 234-5678",
        "location": "New York, NY",
        "linkedin": "linkedin.com/in/michael-rodriguez",
    },
    "summary": (
        "Senior Financial Analyst with 9+ years of experience in corporate finance, investment analysis, "
        "and financial planning. Proven track record managing $500M+ in assets and delivering strategic "
        "insights to C-level executives."
    ),
    "experience": [
        {
            "role": "Senior Financial Analyst",
            "company_or_client": "Goldman Sachs",
            "start_date": "Feb 2021",
            "end_date": "Present",
            "location": "New York, NY",
            "bullets": [
                "Analyzed 50+ acquisition targets, preparing investment recommendations resulting in $2.3B in funded deals",
                "Developed financial models for enterprise valuation, improving forecast accuracy to 98%",
                "Managed portfolio of $500M+ assets, achieving 22% annual return vs 18% benchmark",
                "Led cross-functional team of 8 analysts coordinating quarterly business reviews with 15 senior executives",
                "Implemented automated reporting system reducing month-end close process from 10 days to 3 days",
            ],
        },
        {
            "role": "Financial Analyst",
            "company_or_client": "Morgan Stanley",
            "start_date": "Jul 2018",
            "end_date": "Jan 2021",
            "location": "New York, NY",
            "bullets": [
                "Conducted due diligence on 30+ equity investments for private equity firm managing $10B+ assets under management",
                "Created financial forecasts and variance analysis reducing budget variances by 40%",
                "Established key performance indicators and dashboards for 25+ business units",
                "Collaborated with external auditors ensuring SOX 404 compliance across financial systems",
            ],
        },
    ],
    "education": [
        {
            "degree": "MBA",
            "field": "Finance",
            "institution": "Harvard Business School",
            "gpa": "3.7",
            "graduation_date": "May 2018",
            "location": "Boston, MA",
        },
        {
            "degree": "Bachelor's",
            "field": "Economics",
            "institution": "Cornell University",
            "gpa": "3.9",
            "graduation_date": "May 2015",
            "location": "Ithaca, NY",
        },
    ],
    "certifications": [
        {"name": "Chartered Financial Analyst (CFA) Level III", "issuer": "CFA Institute", "date": "2020"},
    ],
    "skills": {
        "programming_languages": ["Python", "SQL", "VBA"],
        "frameworks": ["Financial modeling", "FP&A", "Corporate Finance"],
        "databases": ["Bloomberg", "FactSet", "S&P Capital IQ"],
        "devops": ["Excel", "Tableau", "Power BI"],
        "collaboration_tools": ["SAP", "Hyperion", "Anaplan"],
    },
    "projects": [
        {
            "title": "Enterprise Budget Automation",
            "organization": "Goldman Sachs",
            "date": "2022",
            "bullets": [
                "Automated annual budget consolidation process across 200+ cost centers",
                "Reduced manual effort by 800+ hours annually",
            ],
        }
    ],
}

HEALTHCARE_NURSE_RESUME = {
    "header": {
        "name": "Dr. Jennifer Martinez",
        "title": "Registered Nurse, Critical Care",
        "email": "j.martinez@healthcare.com",
        "phone": "+1 (555) 345-6789",
        "location": "Los Angeles, CA",
        "linkedin": "linkedin.com/in/jen-martinez",
    },
    "summary": (
        "Dedicated Registered Nurse with 10+ years of critical care experience in ICU/CCU settings. "
        "Specialized in trauma and cardiac nursing with proven ability to manage complex patient cases and "
        "mentor clinical staff. Strong advocate for patient safety and evidence-based practice."
    ),
    "experience": [
        {
            "role": "Clinical Nurse Leader, Trauma ICU",
            "company_or_client": "Cedar-Sinai Medical Center",
            "start_date": "Mar 2021",
            "end_date": "Present",
            "location": "Los Angeles, CA",
            "bullets": [
                "Supervised 25+ nurses and nursing assistants across 40-bed trauma ICU with 95% occupancy rate",
                "Implemented evidence-based pressure injury prevention protocol reducing hospital-acquired infections by 35%",
                "Managed staff scheduling and resource allocation for 24/7 operations maintaining 98% staffing compliance",
                "Mentored 12 new graduate nurses through structured orientation program with 100% retention rate",
                "Developed clinical competency assessments improving care quality metrics to top 10% nationally",
            ],
        },
        {
            "role": "Critical Care Registered Nurse",
            "company_or_client": "UCLA Medical Center",
            "start_date": "Aug 2017",
            "end_date": "Feb 2021",
            "location": "Los Angeles, CA",
            "bullets": [
                "Provided direct patient care for 4-6 critically ill patients in 12-hour shifts",
                "Maintained 100% compliance with infection control protocols across all ICU admissions",
                "Collaborated with interdisciplinary team to develop individualized care plans for 500+ patients annually",
                "Recognized as Nurse of the Year 2019 for exceptional patient advocacy and clinical expertise",
            ],
        },
    ],
    "education": [
        {
            "degree": "Bachelor of Science",
            "field": "Nursing",
            "institution": "University of California, Los Angeles",
            "gpa": "3.8",
            "graduation_date": "May 2014",
            "location": "Los Angeles, CA",
        },
        {
            "degree": "Associate's",
            "field": "Nursing",
            "institution": "Santa Monica College",
            "gpa": "4.0",
            "graduation_date": "May 2012",
            "location": "Santa Monica, CA",
        },
    ],
    "certifications": [
        {"name": "CCRN-K (Critical Care Registered Nurse - Certification)", "issuer": "AACN Certification", "date": "2019"},
        {"name": "Advanced Cardiac Life Support (ACLS)", "issuer": "American Heart Association", "date": "2024"},
        {"name": "Pediatric Advanced Life Support (PALS)", "issuer": "American Heart Association", "date": "2024"},
    ],
    "skills": {
        "programming_languages": ["EHR systems", "Electronic Medical Records"],
        "frameworks": ["Patient care management", "Clinical protocols"],
        "databases": ["Epic EHR", "Cerner", "MediConnect"],
        "devops": ["Wound care", "Cardiac monitoring", "Mechanical ventilation"],
        "collaboration_tools": ["Medical devices", "IV therapy", "Medication administration"],
    },
    "projects": [
        {
            "title": "ICU Safety Initiative",
            "organization": "Cedar-Sinai Medical Center",
            "date": "2023",
            "bullets": [
                "Led multidisciplinary task force improving patient safety metrics",
                "Achieved 12-month streak with zero preventable adverse events",
            ],
        }
    ],
}

CONSULTING_MANAGER_RESUME = {
    "header": {
        "name": "James Wilson",
        "title": "Senior Management Consultant",
        "email": "j.wilson@consulting.com",
        "phone": "+1 (555) 456-7890",
        "location": "Chicago, IL",
        "linkedin": "linkedin.com/in/james-wilson-consulting",
    },
    "summary": (
        "Senior Management Consultant with 11+ years driving digital transformation and operational excellence "
        "across Fortune 500 companies. Expert in strategy development, M&A integration, and organizational "
        "change. Led $250M+ in client engagements."
    ),
    "experience": [
        {
            "role": "Principal Consultant",
            "company_or_client": "McKinsey & Company",
            "start_date": "Sep 2020",
            "end_date": "Present",
            "location": "Chicago, IL",
            "bullets": [
                "Led 12+ consulting engagements for Global 100 clients in healthcare, finance, and technology sectors",
                "Advised C-suite executives on strategic initiatives resulting in $500M+ in cost savings and revenue uplifts",
                "Managed team of 25+ consultants coordinating complex multi-year transformation programs",
                "Developed and delivered custom training for 200+ client stakeholders on digital transformation best practices",
                "Published 3 thought leadership pieces in Harvard Business Review reaching 500K+ readers",
            ],
        },
        {
            "role": "Senior Consultant",
            "company_or_client": "Bain & Company",
            "start_date": "Jun 2017",
            "end_date": "Aug 2020",
            "location": "Boston, MA",
            "bullets": [
                "Executed 15+ engagements in operations optimization and M&A strategy for technology and healthcare sectors",
                "Developed comprehensive business cases and financial models for 8 C-suite board presentations",
                "Managed client relationships and project delivery across $45M in annual engagements",
                "Promoted to Senior Consultant based on exceptional project delivery and client impact metrics",
            ],
        },
    ],
    "education": [
        {
            "degree": "MBA",
            "field": "Business Administration",
            "institution": "Stanford Graduate School of Business",
            "gpa": "3.8",
            "graduation_date": "May 2017",
            "location": "Stanford, CA",
        },
        {
            "degree": "Bachelor's",
            "field": "Industrial Engineering",
            "institution": "Georgia Tech",
            "gpa": "3.9",
            "graduation_date": "May 2015",
            "location": "Atlanta, GA",
        },
    ],
    "certifications": [
        {"name": "Six Sigma Black Belt", "issuer": "American Society for Quality", "date": "2019"},
    ],
    "skills": {
        "programming_languages": ["Python", "SQL", "R"],
        "frameworks": ["Lean", "Six Sigma", "Change Management"],
        "databases": ["Tableau", "Power BI", "Business Objects"],
        "devops": ["Project management", "Agile", "Scrum"],
        "collaboration_tools": ["Microsoft Office", "Salesforce", "SAP"],
    },
    "projects": [
        {
            "title": "Digital Transformation Program",
            "organization": "McKinsey & Company",
            "date": "2022",
            "bullets": [
                "Transformed enterprise operating model for Healthcare Fortune 100 client",
                "Delivered 25% operational efficiency gains exceeding targets by $120M",
            ],
        }
    ],
}

PANEL = {
    "tech": TECH_ENGINEER_RESUME,
    "finance": FINANCE_ANALYST_RESUME,
    "healthcare": HEALTHCARE_NURSE_RESUME,
    "consulting": CONSULTING_MANAGER_RESUME,
}

POOR_RESUME = {
    "header": {"name": "", "title": "", "email": "invalid-email", "phone": "", "location": "", "linkedin": ""},
    "summary": "Brief",
    "experience": [],
    "education": [],
    "certifications": [],
    "skills": {},
    "projects": [],
}


def sample(name: str = "tech") -> dict:
    """Deep copy of a panel resume, safe to mutate inside a test."""
    return copy.deepcopy(PANEL[name])
