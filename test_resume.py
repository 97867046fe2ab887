#!/usr/bin/env python3
"""
Unit tests for decoding data.yaml into a Resume.
"""

import unittest

from portfolio.errors import DataParseError
from portfolio.models.resume import Resume

SAMPLE = b"""
name: Jane Doe
title: Software Engineer
phone: 5550100
experience:
  - title: Engineer
    company: Example Corp
    current: true
    highlights:
      - Shipped things
    technologies: Python
skills:
  languages: [Python, Go]
  tools: [Git]
education:
  - school: State University
    degree: B.S.
    graduation: 2018
certifications:
  - name: Cert
    credential_id: XYZ
"""

class TestResume(unittest.TestCase):

    def test_from_yaml(self):
        resume = Resume.from_yaml(SAMPLE)
        self.assertEqual(resume.name, "Jane Doe")
        self.assertEqual(resume.phone, "5550100")
        self.assertEqual(resume.location, "")
        self.assertEqual(len(resume.experience), 1)

        job = resume.experience[0]
        self.assertEqual(job.company, "Example Corp")
        self.assertTrue(job.current)
        self.assertEqual(job.highlights, ["Shipped things"])
        self.assertEqual(job.end_date, "")

        self.assertEqual(resume.education[0].graduation, "2018")
        self.assertEqual(resume.certifications[0].credential_id, "XYZ")

    def test_skill_categories(self):
        skills = Resume.from_yaml(SAMPLE).skills
        self.assertEqual(list(skills.categories()), [("languages", ["Python", "Go"]), ("tools", ["Git"])])
        self.assertEqual(skills.frontend, [])

    def test_empty_document(self):
        resume = Resume.from_yaml(b"")
        self.assertEqual(resume.name, "")
        self.assertEqual(resume.experience, [])
        self.assertEqual(list(resume.skills.categories()), [])

    def test_invalid_yaml(self):
        with self.assertRaises(DataParseError):
            Resume.from_yaml(b"name: [unclosed\n")

    def test_not_a_mapping(self):
        with self.assertRaises(DataParseError):
            Resume.from_yaml(b"- a\n- b\n")

    def test_wrong_shapes(self):
        cases = [
            b"experience:\n  - title: x\n    highlights: 5\n",
            b"experience: 3\n",
            b"experience:\n  - just a string\n",
            b"skills:\n  tools: 7\n",
            b"skills: [Python]\n",
            b"skills:\n  tools: [[Git]]\n",
            b"name:\n  first: Jane\n",
        ]
        for data in cases:
            with self.subTest(data=data):
                with self.assertRaises(DataParseError):
                    Resume.from_yaml(data)

    def test_to_dict(self):
        result = Resume.from_yaml(SAMPLE).to_dict()
        self.assertEqual(result["name"], "Jane Doe")
        self.assertEqual(result["experience"][0]["technologies"], "Python")
        self.assertEqual(result["skills"]["languages"], ["Python", "Go"])
        self.assertEqual(set(result["skills"]), {"languages", "frontend", "backend", "cloud_devops", "databases", "tools"})

if __name__ == '__main__':
    unittest.main(verbosity=2)
