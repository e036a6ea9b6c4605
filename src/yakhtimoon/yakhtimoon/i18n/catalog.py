"""Bundled UI strings, keyed by locale then dotted key path."""

CATALOG = {
    "en": {
        "common": {
            "appName": "Yakhtimoon",
            "cancel": "Cancel",
            "dashboard": "Dashboard",
            "openForm": "Open form",
            "noFormForSection": "This section is managed elsewhere.",
            "systemError": "Something went wrong, please try again.",
            "loadFailed": "The record could not be loaded.",
            "submitInProgress": "A save is already in progress.",
            "fixErrors": "Please correct the highlighted fields.",
            "select": "Select...",
        },
        "navigation": {
            "courses": "Courses",
            "students": "Students",
            "instructors": "Instructors",
            "lessons": "Lessons",
            "exams": "Exams",
            "attendance": "Attendance",
            "studentExams": "Student Exams",
            "recitation": "Recitation",
            "courseFiles": "Course Files",
            "openMenu": "Open menu",
            "closeMenu": "Close menu",
            "unknownSection": "Unknown section: {section}",
        },
        "quran": {
            "part": "Juz {number}",
        },
        "attendance": {
            "attendanceForm": "Attendance Form",
            "fillAttendanceDetails": "Fill in the attendance details",
            "qrAttendanceOptions": "QR Attendance Options",
            "enterQrManually": "Enter QR number manually",
            "qrPlaceholder": "Student number",
            "useQrNumber": "Use QR number",
            "scanQrCode": "Scan QR code",
            "hideScanner": "Hide scanner",
            "lesson": "Lesson",
            "student": "Student",
            "attendanceStatus": "Attendance status",
            "present": "Present",
            "absent": "Absent",
            "createAttendance": "Create Attendance",
            "updateAttendance": "Update Attendance",
            "invalidQrFormat": "Invalid QR code format",
            "studentNotFound": "Student not found",
            "noQrDetected": "No QR code detected in the image",
            "saved": "Attendance saved successfully",
        },
        "exams": {
            "addNewExam": "Add New Exam",
            "editExam": "Edit Exam",
            "examTitle": "Exam title",
            "examDate": "Exam date",
            "maximumMark": "Maximum mark",
            "passingMark": "Passing mark",
            "course": "Course",
            "createExam": "Create Exam",
            "updateExam": "Update Exam",
            "saved": "Exam saved successfully",
        },
        "instructors": {
            "addNewInstructor": "Add New Instructor",
            "editInstructor": "Edit Instructor",
            "fillInstructorDetails": "Fill in the instructor details",
            "updateInstructorDetails": "Update the instructor details",
            "personalInformation": "Personal Information",
            "fullName": "Full name",
            "email": "Email",
            "password": "Password",
            "confirmPassword": "Confirm password",
            "show": "Show",
            "hide": "Hide",
            "phoneNumber": "Phone number",
            "birthDate": "Birth date",
            "certificate": "Certificate",
            "contactAddress": "Contact & Address",
            "address": "Address",
            "qualificationsExpertise": "Qualifications & Expertise",
            "profileImage": "Profile image",
            "uploadProfileImage": "Upload a profile image (optional)",
            "religiousQualifications": "Religious qualifications",
            "selectQualifications": "Select qualifications",
            "quranKnowledge": "Quran Knowledge",
            "quranMemorizedParts": "Memorized Quran parts",
            "quranPassedParts": "Passed Quran parts",
            "selectMemorizedParts": "Select memorized parts",
            "selectPassedParts": "Select passed parts",
            "passwordsDoNotMatch": "Passwords do not match",
            "createInstructor": "Create Instructor",
            "updateInstructor": "Update Instructor",
            "saved": "Instructor saved successfully",
        },
        "recitation": {
            "addNewRecitation": "Add New Recitation",
            "editRecitationRecord": "Edit Recitation Record",
            "fillRecitationDetails": "Choose the lesson of this recitation session",
            "updateRecitationDetails": "Update the recitation details",
            "courseInformation": "Course Information",
            "tahfeezCourse": "Tahfeez course",
            "sessionDetails": "Session Details",
            "lesson": "Lesson",
            "studentInfo": "Student Information",
            "studentId": "Student ID",
            "recitationProgress": "Recitation Progress",
            "currentJuzPage": "Current juz page",
            "quranMemorizedParts": "Current juz",
            "recitationPerPage": "Recited pages",
            "homework": "Homework",
            "evaluationNotes": "Evaluation & Notes",
            "evaluation": "Evaluation",
            "recitationNotes": "Recitation notes",
            "addNotesPlaceholder": "Add notes about this recitation...",
            "excellent": "Excellent",
            "good": "Good",
            "fair": "Fair",
            "poor": "Poor",
            "soBad": "So bad",
            "page": "Page",
            "assignment": "Assignment",
            "createRecitation": "Create Recitation",
            "updateRecitation": "Update Recitation",
            "saved": "Recitation saved successfully",
        },
    },
    "ar": {
        "common": {
            "appName": "يختمون",
            "cancel": "إلغاء",
            "dashboard": "لوحة التحكم",
            "openForm": "فتح النموذج",
            "noFormForSection": "تتم إدارة هذا القسم في مكان آخر.",
            "systemError": "حدث خطأ ما، يرجى المحاولة مرة أخرى.",
            "loadFailed": "تعذر تحميل السجل.",
            "submitInProgress": "عملية الحفظ قيد التنفيذ بالفعل.",
            "fixErrors": "يرجى تصحيح الحقول المحددة.",
            "select": "اختر...",
        },
        "navigation": {
            "courses": "الدورات",
            "students": "الطلاب",
            "instructors": "المعلمون",
            "lessons": "الدروس",
            "exams": "الاختبارات",
            "attendance": "الحضور",
            "studentExams": "اختبارات الطلاب",
            "recitation": "التسميع",
            "courseFiles": "ملفات الدورة",
            "openMenu": "فتح القائمة",
            "closeMenu": "إغلاق القائمة",
            "unknownSection": "قسم غير معروف: {section}",
        },
        "quran": {
            "part": "الجزء {number}",
        },
        "attendance": {
            "attendanceForm": "نموذج الحضور",
            "fillAttendanceDetails": "أدخل تفاصيل الحضور",
            "qrAttendanceOptions": "خيارات الحضور عبر رمز QR",
            "enterQrManually": "أدخل رقم QR يدويًا",
            "qrPlaceholder": "رقم الطالب",
            "useQrNumber": "استخدام رقم QR",
            "scanQrCode": "مسح رمز QR",
            "hideScanner": "إخفاء الماسح",
            "lesson": "الدرس",
            "student": "الطالب",
            "attendanceStatus": "حالة الحضور",
            "present": "حاضر",
            "absent": "غائب",
            "createAttendance": "تسجيل الحضور",
            "updateAttendance": "تحديث الحضور",
            "invalidQrFormat": "صيغة رمز QR غير صحيحة",
            "studentNotFound": "الطالب غير موجود",
            "noQrDetected": "لم يتم العثور على رمز QR في الصورة",
            "saved": "تم حفظ الحضور بنجاح",
        },
        "exams": {
            "addNewExam": "إضافة اختبار جديد",
            "editExam": "تعديل الاختبار",
            "examTitle": "عنوان الاختبار",
            "examDate": "تاريخ الاختبار",
            "maximumMark": "الدرجة العظمى",
            "passingMark": "درجة النجاح",
            "course": "الدورة",
            "createExam": "إنشاء الاختبار",
            "updateExam": "تحديث الاختبار",
            "saved": "تم حفظ الاختبار بنجاح",
        },
        "instructors": {
            "addNewInstructor": "إضافة معلم جديد",
            "editInstructor": "تعديل بيانات المعلم",
            "fillInstructorDetails": "أدخل بيانات المعلم",
            "updateInstructorDetails": "حدّث بيانات المعلم",
            "personalInformation": "المعلومات الشخصية",
            "fullName": "الاسم الكامل",
            "email": "البريد الإلكتروني",
            "password": "كلمة المرور",
            "confirmPassword": "تأكيد كلمة المرور",
            "show": "إظهار",
            "hide": "إخفاء",
            "phoneNumber": "رقم الهاتف",
            "birthDate": "تاريخ الميلاد",
            "certificate": "الشهادة",
            "contactAddress": "العنوان والتواصل",
            "address": "العنوان",
            "qualificationsExpertise": "المؤهلات والخبرات",
            "profileImage": "الصورة الشخصية",
            "uploadProfileImage": "ارفع صورة شخصية (اختياري)",
            "religiousQualifications": "المؤهلات الشرعية",
            "selectQualifications": "اختر المؤهلات",
            "quranKnowledge": "الحفظ والإتقان",
            "quranMemorizedParts": "الأجزاء المحفوظة",
            "quranPassedParts": "الأجزاء المجتازة",
            "selectMemorizedParts": "اختر الأجزاء المحفوظة",
            "selectPassedParts": "اختر الأجزاء المجتازة",
            "passwordsDoNotMatch": "كلمتا المرور غير متطابقتين",
            "createInstructor": "إضافة المعلم",
            "updateInstructor": "تحديث المعلم",
            "saved": "تم حفظ بيانات المعلم بنجاح",
        },
        "recitation": {
            "addNewRecitation": "إضافة تسميع جديد",
            "editRecitationRecord": "تعديل سجل التسميع",
            "fillRecitationDetails": "اختر درس جلسة التسميع",
            "updateRecitationDetails": "حدّث تفاصيل التسميع",
            "courseInformation": "معلومات الدورة",
            "tahfeezCourse": "دورة تحفيظ",
            "sessionDetails": "تفاصيل الجلسة",
            "lesson": "الدرس",
            "studentInfo": "معلومات الطالب",
            "studentId": "رقم الطالب",
            "recitationProgress": "تقدم التسميع",
            "currentJuzPage": "صفحة الجزء الحالية",
            "quranMemorizedParts": "الجزء الحالي",
            "recitationPerPage": "الصفحات المسمّعة",
            "homework": "الواجب",
            "evaluationNotes": "التقييم والملاحظات",
            "evaluation": "التقييم",
            "recitationNotes": "ملاحظات التسميع",
            "addNotesPlaceholder": "أضف ملاحظات حول هذا التسميع...",
            "excellent": "ممتاز",
            "good": "جيد",
            "fair": "مقبول",
            "poor": "ضعيف",
            "soBad": "ضعيف جدًا",
            "page": "صفحة",
            "assignment": "واجب",
            "createRecitation": "إضافة التسميع",
            "updateRecitation": "تحديث التسميع",
            "saved": "تم حفظ التسميع بنجاح",
        },
    },
}
