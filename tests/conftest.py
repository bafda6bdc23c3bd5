import pytest

HEADER = [
    "Roll_Number", "Name", "Class", "Math", "Math_Grade", "Science",
    "Total_Marks", "Total_Obtained", "Percentage", "CGPA", "Result",
]


@pytest.fixture
def header():
    return list(HEADER)


@pytest.fixture
def table():
    return [
        list(HEADER),
        ["101", "Asha", "5", "95", "A+", "60", "200", "155", "77.5", "8.2", "Pass"],
        ["102", "Ravi", "5", "48", "", "81", "200", "129", "64.5", "6.1", "Pass"],
    ]


@pytest.fixture
def full_table():
    header = [
        "Roll_Number", "Name", "Class", "English", "English_Max", "English_Grade",
        "Hindi", "Hindi_Max", "Total_Marks", "Total_Obtained", "Percentage", "CGPA",
        "Result", "School", "ExamInchargeSignature", "Exam_Name", "DOB",
        "Father_Name", "Mother_Name",
    ]
    return [
        header,
        ["7", "Meera", "8-B", "44", "50", "A", "72", "", "150", "116", "77.33", "Good",
         "Pass", "KV No. 2", "sign_meera.png", "Half Yearly", "2011-04-02",
         "Suresh", "Lata"],
        ["8", "Kabir", "8-B", "30", "", "", "55", "80", "180", "85", "47.2", "",
         "Fail", "", "", "", "", "", ""],
    ]
