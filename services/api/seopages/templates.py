# services/api/seopages/templates.py
#
# Compiled-in default documents. Used to seed a slug when neither store has
# it, and as an upgrade source when a stored legal page is still a one-section
# placeholder.

import copy

SITE_NAME = "LiveSocceRR"
SITE_DOMAIN = "livesoccerr.com"
SITE_URL = f"https://{SITE_DOMAIN}"
SUPPORT_EMAIL = "service@livesoccerr.com"
SUPPORT_PHONE = "+92 300 0000000"

def _p(text: str) -> dict:
    return {"type": "p", "text": text}

def _h3(text: str) -> dict:
    return {"type": "h3", "text": text}

def _ul(*items: str) -> dict:
    return {"type": "ul", "items": list(items)}

def _link_line(prefix: str, href: str) -> dict:
    return {
        "type": "p_rich",
        "inlines": [
            {"type": "text", "value": prefix},
            {"type": "link", "href": href, "label": href},
            {"type": "text", "value": "."},
        ],
    }


TERMS_OF_SERVICE = {
    "schemaVersion": 1,
    "updatedAt": "2025-12-17T00:00:00.000Z",
    "slug": "terms-of-service",
    "seo": {
        "title": f"Terms of Service | {SITE_NAME}",
        "description": (
            f"These Terms of Service govern your access to and use of {SITE_DOMAIN} "
            f"and related services provided by {SITE_NAME}."
        ),
        "h1": "Terms of Service",
        "primaryKeyword": "terms of service",
        "keywords": [
            "terms of service",
            "terms and conditions",
            "acceptable use",
            f"{SITE_DOMAIN} terms",
            f"{SITE_NAME} terms",
        ],
    },
    "content": {
        "h1": "Terms of Service",
        "lastUpdated": "December 17, 2025",
        "sections": [
            {
                "title": "1. Introductory Provisions",
                "blocks": [
                    _p(
                        f"These Terms of Service (the “Terms”) govern your access to and use of {SITE_DOMAIN} "
                        f"and any related services provided by {SITE_NAME} (together, the “Services”). "
                        "By accessing or using the Services, you agree to these Terms. If you do not agree, do not use the Services."
                    ),
                    _p(
                        "If you use the Services on behalf of an organization, you represent that you have authority "
                        "to bind that organization to these Terms."
                    ),
                ],
            },
            {
                "title": "2. The Services and Content",
                "blocks": [
                    _p(
                        "The Services provide sports information such as live scores, final results, fixtures, lineups, "
                        "standings, and other statistics. Some information may be provided by third-party sources. We work "
                        "to keep content accurate and updated, but we do not guarantee completeness or accuracy at all times."
                    ),
                    _p(
                        "You use and rely on the information from the Services at your own risk. The Services are provided "
                        "for personal, non-commercial use unless we explicitly agree otherwise in writing."
                    ),
                ],
            },
            {
                "title": "3. Accounts and User Communications",
                "blocks": [
                    _p(
                        "If we offer account features, you are responsible for maintaining the confidentiality of your login "
                        "credentials and for all activity that occurs under your account. You agree to provide accurate "
                        "information and to keep it updated."
                    ),
                    _p("We may suspend or terminate accounts that violate these Terms or pose a security risk."),
                ],
            },
            {
                "title": "4. Acceptable Use",
                "blocks": [
                    _p("You agree not to:"),
                    _ul(
                        "Use the Services for any unlawful purpose or in violation of applicable laws",
                        "Scrape, crawl, harvest, or aggregate content from the Services without our written permission",
                        "Reverse engineer, interfere with, or disrupt the Services, servers, or networks",
                        "Attempt to bypass rate limits, access controls, or security mechanisms",
                        "Use the Services for commercial purposes (including reselling, sublicensing, or embedding) "
                        "without our written consent",
                        "Upload or transmit malicious code, spam, or harmful content",
                    ),
                    _p("We may take technical and legal measures to protect the Services, including blocking abusive traffic."),
                ],
            },
            {
                "title": "5. Intellectual Property",
                "blocks": [
                    _p(
                        f"All content, trademarks, logos, and materials on the Services are owned by {SITE_NAME} or its "
                        "licensors and are protected by intellectual property laws. You may not copy, modify, distribute, "
                        "sell, or lease any part of our Services or included software without our written permission."
                    ),
                ],
            },
            {
                "title": "6. Third-Party Content and Links",
                "blocks": [
                    _p(
                        "The Services may include third-party content, links, or integrations. We do not control third-party "
                        "services and are not responsible for their content or practices. Your dealings with third parties "
                        "are between you and the third party."
                    ),
                ],
            },
            {
                "title": "7. Betting Odds Disclaimer",
                "blocks": [
                    _p(
                        "If betting odds are displayed, they are provided for informational/news purposes only. The Services "
                        "are not a gambling product and we do not facilitate wagering. You are solely responsible for any "
                        "decisions you make based on displayed information."
                    ),
                ],
            },
            {
                "title": "8. Disclaimers",
                "blocks": [
                    _p(
                        "The Services are provided “as is” and “as available.” To the maximum extent permitted by "
                        "law, we disclaim all warranties of any kind, express or implied, including warranties of "
                        "merchantability, fitness for a particular purpose, and non-infringement."
                    ),
                ],
            },
            {
                "title": "9. Limitation of Liability",
                "blocks": [
                    _p(
                        "To the maximum extent permitted by law, in no event will we be liable for any indirect, incidental, "
                        "special, consequential, or punitive damages, or any loss of profits or revenues, whether incurred "
                        "directly or indirectly, or any loss of data, use, goodwill, or other intangible losses, resulting "
                        "from your access to or use of (or inability to access or use) the Services."
                    ),
                ],
            },
            {
                "title": "10. Termination",
                "blocks": [
                    _p(
                        "We may suspend or terminate your access to the Services at any time if you violate these Terms or "
                        "if we reasonably believe it is necessary to protect the Services or other users. You may stop "
                        "using the Services at any time."
                    ),
                ],
            },
            {
                "title": "11. Privacy",
                "blocks": [
                    _link_line("Your use of the Services is also governed by our Privacy Policy: ", f"{SITE_URL}/privacy-policy"),
                ],
            },
            {
                "title": "12. Changes to These Terms",
                "blocks": [
                    _p(
                        "We may modify these Terms from time to time. We will update the “Last updated” date and, "
                        "where appropriate, provide additional notice. Your continued use of the Services after the change "
                        "means you accept the updated Terms."
                    ),
                ],
            },
            {
                "title": "13. Contact",
                "blocks": [_p(f"For questions about these Terms, contact us at {SUPPORT_EMAIL}.")],
            },
        ],
    },
}


# the privacy page was published under the "Live Score" brand
PRIVACY_BRAND = "Live Score"

PRIVACY_POLICY = {
    "schemaVersion": 1,
    "updatedAt": "2025-12-17T00:00:00.000Z",
    "slug": "privacy-policy",
    "seo": {
        "title": f"Privacy Policy | {PRIVACY_BRAND}",
        "description": (
            f"Read how {PRIVACY_BRAND} collects, uses, shares, and protects information when you use {SITE_DOMAIN}."
        ),
        "h1": "Privacy Policy",
        "primaryKeyword": "privacy policy",
        "keywords": ["privacy policy", "data protection", "cookies", "usage data", f"{SITE_DOMAIN} privacy"],
    },
    "content": {
        "h1": "Privacy Policy",
        "lastUpdated": "December 17, 2025",
        "sections": [
            {
                "title": f"1. Privacy Policy of {SITE_DOMAIN}",
                "blocks": [
                    _h3("1.1 Introduction"),
                    _p(
                        f'This Privacy Policy explains how {PRIVACY_BRAND} ("we", "us", or "our") collects, uses, shares, '
                        f"and protects information when you use our website {SITE_DOMAIN} and any related applications or "
                        'services (together, the "Services"). We built our Services to provide fast live scores, results, '
                        "fixtures, standings, and statistics. To do that reliably, we process limited information such as "
                        "device data and usage signals. This document also explains your rights and choices."
                    ),
                    _h3("1.2 Data Controller and Contact"),
                    _p(
                        f"The data controller for the Services is {PRIVACY_BRAND}. If you have questions about this Privacy "
                        f"Policy or want to exercise your rights, contact us at {SUPPORT_EMAIL}."
                    ),
                    _h3("1.3 Third-Party Links"),
                    _p(
                        "Our Services may include links to third-party websites, services, or embedded content. We do not "
                        "control third-party privacy practices. If you follow a link to a third party, review that party’s "
                        "privacy policy before providing any information."
                    ),
                ],
            },
            {
                "title": "2. Information We Collect",
                "blocks": [
                    _h3("2.1 Information You Provide"),
                    _p(
                        "You may provide information directly to us when you contact support, send feedback, or communicate "
                        "with us. This typically includes your email address and the content of your message. If you choose "
                        "to include additional details, we will process them for the purpose you provided them."
                    ),
                    _h3("2.2 Information Collected Automatically"),
                    _p(
                        "When you use the Services, we may automatically collect certain information about your device and "
                        "usage, such as: IP address, device type, browser type, operating system, approximate location "
                        "(derived from IP), pages viewed, time spent on pages, referring/exit pages, and diagnostic events "
                        "(for example, error logs)."
                    ),
                    _h3("2.3 Cookies and Similar Technologies"),
                    _p(
                        "We may use cookies, local storage, and similar technologies to keep the site working, remember "
                        "preferences, and measure performance. Some cookies are essential for core functionality; others "
                        "help us understand usage and improve the Service."
                    ),
                    _h3("2.4 What We Do Not Intentionally Collect"),
                    _p(
                        "We do not intentionally collect sensitive personal data (such as health information, biometric "
                        "identifiers, or precise geolocation) as part of our normal Service operation. Please do not submit "
                        "sensitive information through the contact form or email."
                    ),
                ],
            },
            {
                "title": "3. How We Use Information",
                "blocks": [
                    _p("We use information to operate, maintain, and improve the Services, including to:"),
                    _ul(
                        "Provide live scores, fixtures, results, standings, and statistics with good performance and reliability",
                        "Monitor and improve site functionality, performance, and user experience",
                        "Detect, prevent, and address technical issues, abuse, scraping, and fraud",
                        "Respond to support requests and communicate with you",
                        "Comply with legal obligations and enforce our Terms of Service",
                    ),
                ],
            },
            {
                "title": "4. Legal Bases for Processing",
                "blocks": [
                    _p(
                        "Where applicable law requires a legal basis (for example under GDPR), we rely on one or more of "
                        "the following:"
                    ),
                    _ul(
                        "Legitimate interests (to run, secure, and improve the Services)",
                        "Performance of a contract (to provide the Services you request)",
                        "Compliance with legal obligations",
                        "Consent (where required for certain cookies or communications)",
                    ),
                ],
            },
            {
                "title": "5. Sharing of Information",
                "blocks": [
                    _p("We may share information in the following circumstances:"),
                    _ul(
                        "Service providers: with vendors who help us host the site, deliver content, analyze usage, or "
                        "provide security (they process data on our instructions)",
                        "Legal and safety: to comply with law, respond to lawful requests, or protect the rights, property, "
                        "and safety of users and the Services",
                        "Business transfers: if we are involved in a merger, acquisition, or asset sale, information may be "
                        "transferred as part of that transaction",
                    ),
                    _p(
                        "We do not sell your personal information in the ordinary sense of “selling” under privacy "
                        "laws. If we ever introduce a program that could be considered a sale or sharing for targeted "
                        "advertising, we will update this policy and provide appropriate choices."
                    ),
                ],
            },
            {
                "title": "6. Data Retention",
                "blocks": [
                    _p(
                        "We keep personal data only as long as necessary for the purposes described in this Privacy Policy, "
                        "unless a longer retention period is required or permitted by law. For example, support emails may "
                        "be retained to resolve issues and maintain records of requests, and limited logs may be retained "
                        "for security and debugging."
                    ),
                ],
            },
            {
                "title": "7. Security",
                "blocks": [
                    _p(
                        "We use reasonable administrative, technical, and organizational safeguards to protect information "
                        "against unauthorized access, alteration, disclosure, or destruction. No method of transmission or "
                        "storage is 100% secure, so we cannot guarantee absolute security."
                    ),
                ],
            },
            {
                "title": "8. Your Rights and Choices",
                "blocks": [
                    _p(
                        "Depending on your location, you may have rights to access, correct, delete, or object to certain "
                        "processing of your personal data. You may also have the right to restrict processing or request "
                        "data portability."
                    ),
                    _p(
                        f"To exercise these rights, contact us at {SUPPORT_EMAIL}. We may need to verify your request to "
                        "protect your privacy and security."
                    ),
                    _ul(
                        "Cookies: you can control cookies through your browser settings and (where available) site consent tools",
                        "Marketing emails: if we send promotional emails, you can opt out using the unsubscribe link "
                        "(if present) or by contacting us",
                        "Do Not Track: some browsers offer “Do Not Track” signals; we do not guarantee a response "
                        "to such signals",
                    ),
                ],
            },
            {
                "title": "9. Children’s Privacy",
                "blocks": [
                    _p(
                        "The Services are not directed to children under 13 (or the age required by local law), and we do "
                        "not knowingly collect personal information from children. If you believe a child has provided "
                        "personal information to us, contact us and we will take appropriate steps."
                    ),
                ],
            },
            {
                "title": "10. International Transfers",
                "blocks": [
                    _p(
                        "Your information may be processed in countries other than where you live, which may have different "
                        "data protection laws. When we transfer data internationally, we take steps to provide an "
                        "appropriate level of protection as required by applicable law."
                    ),
                ],
            },
            {
                "title": "11. Changes to This Privacy Policy",
                "blocks": [
                    _p(
                        "We may update this Privacy Policy from time to time. We will revise the “Last updated” "
                        "date and, where appropriate, provide additional notice. Your continued use of the Services after "
                        "the update means you accept the revised policy."
                    ),
                ],
            },
            {
                "title": "Contact Us",
                "blocks": [_p(f"If you have questions about this Privacy Policy, contact us at {SUPPORT_EMAIL}.")],
            },
        ],
    },
}


CONTACT = {
    "schemaVersion": 1,
    "updatedAt": "2025-12-23T00:00:00.000Z",
    "slug": "contact",
    "seo": {
        "title": f"Contact Us | {SITE_NAME}",
        "description": f"Contact {SITE_NAME} for support, bug reports, and feedback.",
        "h1": "Contact Us",
        "primaryKeyword": "contact livesoccerr",
        "keywords": ["contact", "support", "feedback", f"{SITE_NAME} contact"],
        "canonical": "/contact",
        "robots": {"index": True, "follow": True},
        "ogTitle": f"Contact Us | {SITE_NAME}",
        "ogDescription": f"Reach {SITE_NAME} at {SUPPORT_EMAIL}.",
        "ogImage": "/og.png",
    },
    "content": {
        "h1": "Contact Us",
        "lastUpdated": "December 17, 2025",
        "intro": [
            "To make sure your query or feedback gets to the right person, please contact us via email.",
            "We review every message and will get back to you if we need more information.",
        ],
        "contactDetails": {
            "supportEmail": SUPPORT_EMAIL,
            "phone": SUPPORT_PHONE,
            "whatsapp": SUPPORT_PHONE,
            "address": ["Your Company Address Line 1", "City, Country"],
            "supportHours": "Mon–Sun, 24/7",
        },
        "sections": [
            {
                "title": "What you can contact us about",
                "blocks": [_ul("Technical support", "Bug reports", "Feedback and feature requests", "Partnerships")],
            },
            {
                "title": "Email",
                "blocks": [_p(f"Email us at {SUPPORT_EMAIL}.")],
            },
        ],
        "note": "We will use only email for contacting.",
    },
}


_TEMPLATES = {
    "terms-of-service": TERMS_OF_SERVICE,
    "privacy-policy": PRIVACY_POLICY,
    "contact": CONTACT,
}

def template_for(slug: str) -> dict:
    """Fresh copy of the default document for ``slug``; callers may mutate it."""
    try:
        return copy.deepcopy(_TEMPLATES[slug])
    except KeyError:
        raise KeyError(f"no template for page slug {slug!r}") from None
