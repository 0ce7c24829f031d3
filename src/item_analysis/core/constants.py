# Smallest exam that can be analysed meaningfully
MIN_STUDENTS = 3
MIN_ITEMS = 2

# Labels used when the upload leaves an identifier blank
STUDENT_ID_PREFIX = "Student_"
ITEM_ID_PREFIX = "Item_"
