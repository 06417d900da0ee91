"""Static story maps served by the mock provider.

Every template carries an "Infrastructure & Technical" epic with
"Security & Performance" and "Data Management" features, the same
enabling-story structure the live providers are prompted for.
"""
from __future__ import annotations


def _task(title, description, priority, effort, *criteria):
    return {
        "title": title,
        "description": description,
        "priority": priority,
        "effort": effort,
        "acceptance_criteria": list(criteria),
    }


def _feature(title, description, *tasks):
    return {"title": title, "description": description, "tasks": list(tasks)}


def _epic(title, description, *features):
    return {"title": title, "description": description, "features": list(features)}


def _infrastructure(security_tasks, data_tasks):
    return _epic(
        "Infrastructure & Technical",
        "Technical infrastructure and non-functional requirements",
        _feature(
            "Security & Performance",
            "Security measures and performance optimization",
            *security_tasks,
        ),
        _feature(
            "Data Management",
            "Database and data handling infrastructure",
            *data_tasks,
        ),
    )


ECOMMERCE = {
    "title": "E-commerce Platform",
    "description": "A comprehensive e-commerce platform for online retail",
    "epics": [
        _epic(
            "User Management",
            "Core user account and authentication functionality",
            _feature(
                "User Registration",
                "Allow users to create accounts",
                _task(
                    "Registration Form",
                    "Create user registration form with validation",
                    "high", "3 days",
                    "Form includes email, password, and name fields",
                    "Email validation is implemented",
                    "Password strength requirements are enforced",
                ),
                _task(
                    "Email Verification",
                    "Send verification email to new users",
                    "medium", "2 days",
                    "Verification email is sent upon registration",
                    "Email contains secure verification link",
                    "Account is activated upon email verification",
                ),
            ),
            _feature(
                "User Authentication",
                "Login and session management",
                _task(
                    "Login System",
                    "Implement secure login functionality",
                    "high", "2 days",
                    "Users can login with email and password",
                    "Failed login attempts are tracked",
                    "Session tokens are securely generated",
                ),
            ),
        ),
        _epic(
            "Product Catalog",
            "Product browsing and search functionality",
            _feature(
                "Product Listing",
                "Display products in a searchable catalog",
                _task(
                    "Product Grid",
                    "Create responsive product grid layout",
                    "high", "4 days",
                    "Products display in responsive grid",
                    "Each product shows image, title, and price",
                    "Grid adapts to different screen sizes",
                ),
                _task(
                    "Search Functionality",
                    "Implement product search with filters",
                    "medium", "3 days",
                    "Users can search products by name",
                    "Filter by category, price, and rating",
                    "Search results update in real-time",
                ),
            ),
        ),
        _epic(
            "Shopping Cart",
            "Cart management and checkout process",
            _feature(
                "Cart Management",
                "Add, remove, and update cart items",
                _task(
                    "Add to Cart",
                    "Allow users to add products to cart",
                    "high", "2 days",
                    "Users can add products to cart",
                    "Cart quantity is updated",
                    "Cart persists across sessions",
                ),
                _task(
                    "Cart Review",
                    "Display cart contents and totals",
                    "medium", "3 days",
                    "Cart shows all added items",
                    "Subtotal, tax, and total are calculated",
                    "Users can modify quantities or remove items",
                ),
            ),
        ),
        _infrastructure(
            [
                _task(
                    "Set up SSL/TLS encryption",
                    "Implement secure communication protocols for all transactions",
                    "high", "2 days",
                    "All data transmission is encrypted with TLS 1.3",
                    "SSL certificate is properly configured and auto-renewed",
                    "Security headers (HSTS, CSP) are implemented",
                ),
                _task(
                    "Implement API rate limiting",
                    "Protect against abuse and ensure fair usage of resources",
                    "medium", "3 days",
                    "Rate limits are enforced per user/IP (100 requests/minute)",
                    "Graceful handling of rate limit exceeded with proper error messages",
                    "Monitoring and alerting for rate limit violations",
                ),
                _task(
                    "Set up monitoring and alerting",
                    "Monitor system health, performance, and business metrics",
                    "medium", "4 days",
                    "Real-time monitoring of key metrics (response time, error rate, throughput)",
                    "Automated alerts for critical issues (downtime, high error rates)",
                    "Performance dashboards are available for stakeholders",
                ),
            ],
            [
                _task(
                    "Design scalable database architecture",
                    "Create robust database design for horizontal scaling",
                    "high", "5 days",
                    "Database supports horizontal scaling with read replicas",
                    "Proper indexing strategy for optimal query performance",
                    "Data backup and recovery procedures with 99.9% uptime SLA",
                ),
                _task(
                    "Implement caching strategy",
                    "Improve performance with intelligent caching layers",
                    "medium", "3 days",
                    "Redis cache is properly configured for session and data caching",
                    "Cache invalidation strategy is implemented for data consistency",
                    "Performance improvement is measurable (50% reduction in response time)",
                ),
                _task(
                    "Set up automated security scanning",
                    "Implement continuous security vulnerability assessment",
                    "medium", "2 days",
                    "Automated security scans run daily",
                    "Vulnerability reports are generated and sent to security team",
                    "Integration with CI/CD pipeline for security checks",
                ),
            ],
        ),
    ],
}

SOCIAL_NETWORK = {
    "title": "Social Network Platform",
    "description": "A social networking platform for connecting people",
    "epics": [
        _epic(
            "User Profiles",
            "User profile creation and management",
            _feature(
                "Profile Creation",
                "Users can create and edit their profiles",
                _task(
                    "Profile Setup",
                    "Create profile setup wizard",
                    "high", "4 days",
                    "Users can upload profile picture",
                    "Bio and personal information can be added",
                    "Profile is publicly viewable",
                ),
            ),
        ),
        _epic(
            "Content Sharing",
            "Post and share content with connections",
            _feature(
                "Post Creation",
                "Create and share posts with text and media",
                _task(
                    "Text Posts",
                    "Allow users to create text-based posts",
                    "high", "3 days",
                    "Users can write and publish text posts",
                    "Posts support basic formatting",
                    "Posts appear in user's feed",
                ),
            ),
        ),
        _infrastructure(
            [
                _task(
                    "Implement user authentication framework",
                    "Set up secure user authentication and authorization",
                    "high", "3 days",
                    "OAuth 2.0 authentication is implemented",
                    "Role-based access control (RBAC) is configured",
                    "Session management with secure token handling",
                ),
                _task(
                    "Set up content moderation system",
                    "Implement automated content filtering and moderation",
                    "medium", "4 days",
                    "Automated content filtering for inappropriate content",
                    "Manual moderation tools for admin users",
                    "Appeal process for flagged content",
                ),
                _task(
                    "Implement real-time notifications",
                    "Set up WebSocket-based real-time notification system",
                    "medium", "3 days",
                    "Real-time notifications for new connections and messages",
                    "Push notifications for mobile devices",
                    "Notification preferences can be customized",
                ),
            ],
            [
                _task(
                    "Design scalable media storage",
                    "Implement scalable storage for user uploads and media",
                    "high", "4 days",
                    "CDN integration for fast media delivery",
                    "Image optimization and compression",
                    "Backup and redundancy for media files",
                ),
                _task(
                    "Implement search functionality",
                    "Set up full-text search for users and content",
                    "medium", "3 days",
                    "Elasticsearch integration for fast search",
                    "Search results include users, posts, and comments",
                    "Search suggestions and autocomplete functionality",
                ),
            ],
        ),
    ],
}

TASK_MANAGEMENT = {
    "title": "Task Management System",
    "description": "A comprehensive task and project management platform",
    "epics": [
        _epic(
            "Task Creation",
            "Create and manage individual tasks",
            _feature(
                "Task Setup",
                "Create new tasks with details and assignments",
                _task(
                    "Task Form",
                    "Create task creation form with all fields",
                    "high", "3 days",
                    "Form includes title, description, and due date",
                    "Users can assign tasks to team members",
                    "Priority levels can be set",
                ),
            ),
        ),
        _epic(
            "Project Organization",
            "Organize tasks into projects and categories",
            _feature(
                "Project Management",
                "Create and manage project structures",
                _task(
                    "Project Creation",
                    "Allow users to create new projects",
                    "high", "2 days",
                    "Users can create new projects",
                    "Projects can have multiple tasks",
                    "Project progress is tracked",
                ),
            ),
        ),
        _infrastructure(
            [
                _task(
                    "Set up role-based access control",
                    "Implement granular permissions for different user roles",
                    "high", "3 days",
                    "Admin, manager, and user roles are defined",
                    "Permissions are granular and configurable",
                    "Access control is enforced at API and UI levels",
                ),
                _task(
                    "Implement audit logging",
                    "Track all user actions for compliance and debugging",
                    "medium", "2 days",
                    "All user actions are logged with timestamps",
                    "Audit logs are searchable and exportable",
                    "Sensitive operations trigger additional logging",
                ),
                _task(
                    "Set up automated backups",
                    "Implement reliable data backup and recovery procedures",
                    "high", "2 days",
                    "Daily automated backups to secure location",
                    "Backup restoration process is tested monthly",
                    "Data retention policy is implemented",
                ),
            ],
            [
                _task(
                    "Design scalable database architecture",
                    "Create robust database design for task management",
                    "high", "4 days",
                    "Database supports concurrent user access",
                    "Proper indexing for task queries and filtering",
                    "Data integrity constraints are enforced",
                ),
                _task(
                    "Implement real-time collaboration",
                    "Enable real-time updates for collaborative task management",
                    "medium", "3 days",
                    "WebSocket connections for real-time updates",
                    "Conflict resolution for simultaneous edits",
                    "Presence indicators show who's online",
                ),
            ],
        ),
    ],
}

GENERIC_TITLE = "Product Application"

# The description is filled in with the caller's text.
GENERIC = {
    "title": GENERIC_TITLE,
    "description": "",
    "epics": [
        _epic(
            "Core Features",
            "Essential functionality for the application",
            _feature(
                "User Interface",
                "Main user interface and navigation",
                _task(
                    "Homepage Design",
                    "Create the main landing page",
                    "high", "5 days",
                    "Page loads quickly and is responsive",
                    "Navigation is intuitive and accessible",
                    "Content is well-organized and readable",
                ),
                _task(
                    "User Authentication",
                    "Implement user login and registration",
                    "high", "4 days",
                    "Users can register new accounts",
                    "Secure login functionality",
                    "Password reset capability",
                ),
            ),
        ),
        _epic(
            "Data Management",
            "Handle data storage and retrieval",
            _feature(
                "Database Design",
                "Design and implement database structure",
                _task(
                    "Schema Design",
                    "Create database schema for the application",
                    "high", "3 days",
                    "Database supports all required data types",
                    "Relationships are properly defined",
                    "Indexes are optimized for performance",
                ),
            ),
        ),
        _infrastructure(
            [
                _task(
                    "Set up CI/CD pipeline",
                    "Implement automated testing and deployment pipeline",
                    "high", "3 days",
                    "Automated testing runs on every commit",
                    "Deployment is automated and rollback-capable",
                    "Environment-specific configurations are managed",
                ),
                _task(
                    "Implement security scanning",
                    "Set up automated security vulnerability assessment",
                    "medium", "2 days",
                    "Automated security scans run daily",
                    "Vulnerability reports are generated",
                    "Integration with CI/CD pipeline",
                ),
                _task(
                    "Set up monitoring and alerting",
                    "Monitor application health and performance",
                    "medium", "3 days",
                    "Real-time monitoring of key metrics",
                    "Automated alerts for critical issues",
                    "Performance dashboards are available",
                ),
            ],
            [
                _task(
                    "Design scalable database architecture",
                    "Create robust database design for the application",
                    "high", "4 days",
                    "Database supports horizontal scaling",
                    "Proper indexing for optimal performance",
                    "Data backup and recovery procedures",
                ),
                _task(
                    "Implement caching strategy",
                    "Improve performance with intelligent caching",
                    "medium", "2 days",
                    "Redis cache is properly configured",
                    "Cache invalidation strategy is implemented",
                    "Performance improvement is measurable",
                ),
            ],
        ),
    ],
}
